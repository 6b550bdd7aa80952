from os import environ
from pathlib import Path
from typing import Any, Mapping, Optional

from std2.graphlib import merge
from std2.pickle.decoder import new_decoder
from yaml import safe_load

from .consts import CONFIG_VAR, CONFIG_YML
from .shared.logging import log
from .shared.settings import Settings, ValidationError, validate_ranking
from .shared.types import UTF8

_DECODER = new_decoder[Settings](Settings)


def _user_conf(path: Optional[Path]) -> Mapping[str, Any]:
    if path is None:
        return {}
    else:
        log.debug("%s", f"USER CONFIG -- {path}")
        conf = safe_load(path.read_text(UTF8)) or {}
        if not isinstance(conf, Mapping):
            raise ValidationError(f"{path} :: expected a mapping")
        return conf


def load(path: Optional[Path] = None) -> Settings:
    """
    Bundled defaults, overlaid with the user file

    The user file is `path`, else `$GESTALT_CONFIG` when set.
    """

    user_path = path or (Path(p) if (p := environ.get(CONFIG_VAR)) else None)
    yml = safe_load(CONFIG_YML.read_text(UTF8))
    merged = merge(yml, _user_conf(user_path), replace=True)
    config = _DECODER(merged)

    validate_ranking(config.ranking)
    return config
