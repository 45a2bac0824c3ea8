"""Internal constants shared across the library."""

from importlib.metadata import PackageNotFoundError, version

try:
    VERSION = version("pyplaceholder")
except PackageNotFoundError:
    VERSION = "0+local"

BASE_URL = "https://jsonplaceholder.typicode.com"
USER_AGENT = f"pyplaceholder/{VERSION} (+aiohttp)"

# JSONPlaceholder serves exactly 5000 photos.
TOTAL_PHOTOS = 5000
DEFAULT_PAGE_SIZE = 20
DEFAULT_REQUEST_TIMEOUT = 10.0

USERS_ENDPOINT = "/users"
PHOTOS_ENDPOINT = "/photos"
