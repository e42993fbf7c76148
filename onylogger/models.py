from typing import Iterable, List, Mapping, Tuple, Union
from pydantic import BaseModel, field_validator

class LoggerConfig(BaseModel):
    debug_enabled: bool = False
    colors_enabled: bool = True
    suppress_output: bool = False

    class Config:
        extra = "forbid"

class Option(BaseModel):
    title: str
    description: str = ""

    @field_validator("title")
    def validate_title(cls, v):
        if not v:
            raise ValueError("Option title must not be empty")
        return v

    class Config:
        extra = "forbid"

OptionLike = Union[Option, str, Tuple[str, str]]

# Mappings keep insertion order, so the menu order is the order supplied
def normalize_options(options: Union[Mapping[str, str], Iterable[OptionLike]]) -> List[Option]:
    if isinstance(options, Mapping):
        return [Option(title=title, description=desc or "") for title, desc in options.items()]

    normalized = []
    for item in options:
        if isinstance(item, Option):
            normalized.append(item)
        elif isinstance(item, str):
            normalized.append(Option(title=item))
        else:
            title, desc = item
            normalized.append(Option(title=title, description=desc or ""))
    return normalized
