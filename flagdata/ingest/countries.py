# flagdata/ingest/countries.py
import json
from typing import Dict, Optional

from flagdata.utils.env import Config


def load_country_data(config: Config) -> Optional[Dict[str, str]]:
    """
    Read the country code -> country name mapping.

    Returns None when the file holds no usable content (empty, null, {}).
    A missing file or malformed JSON is not handled here; the caller gets
    the FileNotFoundError / JSONDecodeError as-is.
    """
    text = config.source_data_file.read_text(encoding="utf-8")
    if not text.strip():
        return None
    data = json.loads(text)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"{config.source_data_file}: expected a JSON object of code -> name")
    return data or None
