from .api import Api
from .database import Database
from .events import Events
from .functions import Functions
from .layers import Layers

__all__ = ["Api", "Database", "Events", "Functions", "Layers"]
