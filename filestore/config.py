"""Filestore configuration."""

import os

from dotenv import load_dotenv

# Load .env so FILESTORE_* vars are available
load_dotenv()

# Directory that stored content lives under (relative paths resolve against cwd)
ROOT_PATH = os.getenv("FILESTORE_ROOT_PATH", "dragonfly")

# Filesystem prefix stripped from absolute paths to form public urls (unset disables url_for)
SERVER_ROOT = os.getenv("FILESTORE_SERVER_ROOT", "") or None

# Metadata sidecars are written unless explicitly switched off
STORE_META = os.getenv("FILESTORE_STORE_META", "true").lower() not in ("false", "0", "no")

# Apply the retrieve/destroy key check to explicit paths passed to store()
VALIDATE_STORE_PATHS = os.getenv("FILESTORE_VALIDATE_STORE_PATHS", "false").lower() in ("true", "1", "yes")

# Upper bound on alternate names tried when the target path is taken
MAX_DISAMBIGUATION_ATTEMPTS = int(os.getenv("FILESTORE_MAX_DISAMBIGUATION_ATTEMPTS", "1000"))
