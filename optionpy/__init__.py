from .errors import OptionError, IllegalConstruction, UnwrapOnAbsent
from .option import Option, Some, Nothing, some, nothing, from_nullable
from .result import Result, Ok, Err
