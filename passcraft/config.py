# passcraft/config.py
"""
Simple settings persistence for passcraft.
Settings saved as JSON in $PASSCRAFT_HOME, %APPDATA%/passcraft (Windows) or
~/.passcraft (fallback). Only the policy is stored, never a password.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from .policy import DEFAULT_POLICY, Policy, normalize

log = logging.getLogger(__name__)

POLICY_KEY = "password-criteria"

DEFAULTS: Dict[str, Any] = {
    POLICY_KEY: DEFAULT_POLICY.to_dict(),
    "copies": 1,
}


def config_dir() -> str:
    home = os.getenv("PASSCRAFT_HOME")
    if home:
        d = home
    elif os.getenv("APPDATA"):
        d = os.path.join(os.environ["APPDATA"], "passcraft")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passcraft")
    os.makedirs(d, exist_ok=True)
    return d


def config_path() -> str:
    return os.path.join(config_dir(), "config.json")


def _defaults() -> Dict[str, Any]:
    out = DEFAULTS.copy()
    out[POLICY_KEY] = dict(DEFAULTS[POLICY_KEY])
    return out


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return _defaults()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable settings file %s: %s", p, e)
        return _defaults()
    if not isinstance(data, dict):
        log.warning("ignoring settings file %s: expected a JSON object", p)
        return _defaults()
    # merge defaults
    out = _defaults()
    out.update(data)
    copies = out["copies"]
    if isinstance(copies, bool) or not isinstance(copies, int) or copies < 0:
        log.warning("ignoring invalid copies setting %r in %s", copies, p)
        out["copies"] = DEFAULTS["copies"]
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> None:
    """Write settings atomically (temp file, then rename)."""
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    tmp = p + ".tmp"
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(cfg, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, p)
    except Exception:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


def load_policy(path: Optional[str] = None) -> Policy:
    raw = load_config(path).get(POLICY_KEY)
    if not isinstance(raw, dict):
        return DEFAULT_POLICY
    try:
        policy = Policy.from_dict(raw)
    except (TypeError, ValueError) as e:
        log.warning("ignoring malformed %s entry: %s", POLICY_KEY, e)
        return DEFAULT_POLICY
    return normalize(policy)


def save_policy(policy: Policy, path: Optional[str] = None) -> None:
    cfg = load_config(path)
    cfg[POLICY_KEY] = normalize(policy).to_dict()
    save_config(cfg, path)
    log.debug("saved policy %s", cfg[POLICY_KEY])
