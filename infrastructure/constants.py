from pathlib import Path

# Repo-root conventional directories/files (overrideable via resolver.yaml)
PROJECT_ROOT = Path(__file__).resolve().parents[1]

CONFIG_DIR = PROJECT_ROOT / "configs"
RESOLVER_CONFIG_FILE = CONFIG_DIR / "resolver.yaml"

DATA_DIR = PROJECT_ROOT / "dataset"
TAXONOMY_FILE = DATA_DIR / "microorganisms.csv"
SITE_CODES_FILE = DATA_DIR / "microorganisms_site_codes.csv"
