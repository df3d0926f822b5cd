"""Module holding constants used across sesync."""

API_BASE = "https://api.github.com"
GITHUB_API_ACCEPT = "application/vnd.github+json"
USER_AGENT = "sesync/0.1 (+https://standardebooks.org)"
GITHUB_ORG = "standardebooks"
PER_PAGE = 100
HTTP_TIMEOUT_SEC = 30

METADATA_PATH = "src/epub/content.opf"
METADATA_REVISION = "HEAD"
IDENTIFIER_PREFIX = "url:https://standardebooks.org/ebooks/"
IDENTIFIER_ID = "uid"
DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"

EXCLUDED_REPOS = ("tools", "web", "manual")
# names this long may be truncated on disk by the filesystem
LONG_NAME_THRESHOLD = 100

VERBOSITY_PATTERN = r"^[0-9]+$"
TOKEN_PATTERN = r"^[0-9A-Za-z]+$"
