# cinefav/client/__init__.py

from .alerts import Alert, AlertCenter
from .api import ApiClient
from .app import MobileApp
from .catalog import CatalogGateway
from .config import ClientSettings, get_client_settings
from .errors import ApiError, CatalogError, ClientError, SessionExpiredError
from .favorites import FavoritesCache, LocalFavorite
from .language import LanguageStore
from .navigation import Navigator, Route, Stack
from .session import SessionStore
from .storage import LocalStorage

__all__ = [
    "Alert",
    "AlertCenter",
    "ApiClient",
    "MobileApp",
    "CatalogGateway",
    "ClientSettings",
    "get_client_settings",
    "ApiError",
    "CatalogError",
    "ClientError",
    "SessionExpiredError",
    "FavoritesCache",
    "LocalFavorite",
    "LanguageStore",
    "Navigator",
    "Route",
    "Stack",
    "SessionStore",
    "LocalStorage",
]
