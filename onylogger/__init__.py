from .errors import EmptyOptionsError, NoSelectionError, OnyloggerError, SpinnerStateError
from .formatting import Formatter, Level
from .logging_utils import (
    CaptureSink, ConsoleLogger, ConsoleSink, configure, console_logger, debug, debugf,
    error, errorf, info, infof, init_logger, log_message, multiline_user_input, sdebug,
    sdebugf, serror, serrorf, sinfo, sinfof, ssuccess, ssuccessf, success, successf,
    swarning, swarningf, user_input, warning, warningf,
)
from .models import LoggerConfig, Option
from .selector import SelectorModel, select_option
from .spinner import Spinner, spinner

__version__ = "0.1.0"
