from pathlib import Path

# Repo-root conventional directories/files (overrideable via --config)
CONFIG_DIR = Path("configs")
TAGGING_FILE = CONFIG_DIR / "tagging.yaml"
ENV_FILE = Path(".env")

# Environment variable overrides for the tagging section
ENV_PREFIX = "TAGLIST_"
ENV_DELIMITER = f"{ENV_PREFIX}DELIMITER"
ENV_GLUE = f"{ENV_PREFIX}GLUE"
ENV_FORCE_LOWERCASE = f"{ENV_PREFIX}FORCE_LOWERCASE"
ENV_FORCE_PARAMETERIZE = f"{ENV_PREFIX}FORCE_PARAMETERIZE"
