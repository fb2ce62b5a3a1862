import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("KANATYPE_LOG_LEVEL", "WARNING").upper()

# Number of DAGs memoized per builder, keyed on the normalized kana string (0 disables)
DAG_CACHE_SIZE = int(os.getenv("KANATYPE_DAG_CACHE_SIZE", "256"))

# Romanization scheme used by the module-level helpers
DEFAULT_SCHEME = os.getenv("KANATYPE_SCHEME", "google")
