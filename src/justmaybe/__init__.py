from loguru import logger

from ._collect import cat_maybes as cat_maybes
from ._collect import collect_mapped as collect_mapped
from ._collect import collect_present as collect_present
from ._collect import map_maybes as map_maybes
from ._maybe import Maybe as Maybe
from ._some import Option as Option
from ._some import Some as Some
from .config import Settings as Settings
from .config import current_settings as current_settings
from .config import load_settings as load_settings
from .config import use_settings as use_settings
from .err import AbsentValueError as AbsentValueError
from .err import MaybeError as MaybeError
from .err import SettingsError as SettingsError
from .globals import LOGGER_NAME

logger.disable(LOGGER_NAME)
