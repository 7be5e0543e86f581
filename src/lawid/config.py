import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths
PACKAGE_ROOT = Path(__file__).parent
DATA_DIR = PACKAGE_ROOT / "data"
REGISTRY_PATH = DATA_DIR / "registry.yaml"

# Fixed widths of the identifier grammar
LAW_ID_LENGTH = 15
PAYLOAD_LENGTH = 12
MASK_BITS = 28
PATCH_SENTINEL = "0" * LAW_ID_LENGTH


def get_log_level() -> str:
    """
    CLI のログレベルを取得

    .env があれば読み込んだ上で LAWID_LOG_LEVEL を参照する。
    """
    load_dotenv()
    return os.getenv("LAWID_LOG_LEVEL", "WARNING").upper()
