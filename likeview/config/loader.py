from __future__ import annotations

import json
import logging
from typing import Any, Dict

from .schema import ViewConfig

logger = logging.getLogger(__name__)


def _strip_jsonc_comments(src: str) -> str:
    # Removes //, # and /* */ comments while preserving string literals.
    out: list[str] = []
    i = 0
    n = len(src)
    quote = ""

    while i < n:
        ch = src[i]
        nxt = src[i + 1] if i + 1 < n else ""

        if quote:
            out.append(ch)
            if ch == "\\" and nxt:
                out.append(nxt)
                i += 2
                continue
            if ch == quote:
                quote = ""
            i += 1
            continue

        if ch in ("\"", "'"):
            quote = ch
            out.append(ch)
            i += 1
        elif (ch == "/" and nxt == "/") or ch == "#":
            end = src.find("\n", i)
            i = n if end < 0 else end
        elif ch == "/" and nxt == "*":
            end = src.find("*/", i + 2)
            i = n if end < 0 else end + 2
        else:
            out.append(ch)
            i += 1

    return "".join(out)


def load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    raw = raw.lstrip("\ufeff")
    data = json.loads(_strip_jsonc_comments(raw))
    if not isinstance(data, dict):
        raise ValueError("config root must be an object")
    logger.debug("loaded config %s (sections: %s)", path, ", ".join(sorted(data)))
    return data


def _get_section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    v = cfg.get(key)
    return v if isinstance(v, dict) else {}


def flatten_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    flat: Dict[str, Any] = {}

    window = _get_section(cfg, "window")
    icons = _get_section(cfg, "icons")
    burst = _get_section(cfg, "burst")

    def pull(dst_key: str, section: Dict[str, Any], section_key: str):
        if section_key in section:
            flat[dst_key] = section.get(section_key)

    pull("w", window, "w")
    pull("h", window, "h")
    pull("fps", window, "fps")

    pull("liked_icon", icons, "liked")
    pull("unliked_icon", icons, "unliked")
    pull("icon_left", icons, "left")
    pull("icon_top", icons, "top")
    pull("icon_inset", icons, "inset")

    pull("duration_ms", burst, "duration_ms")
    pull("particle_count", burst, "particle_count")
    pull("target_distance", burst, "target_distance")
    pull("particle_size", burst, "size")
    pull("angle", burst, "angle")
    pull("particle_color", burst, "color")
    pull("seed", burst, "seed")

    return flat


def config_to_dict(config: ViewConfig) -> Dict[str, Any]:
    b = config.burst
    return {
        "window": {"w": config.w, "h": config.h, "fps": config.fps},
        "icons": {
            "liked": config.liked_icon,
            "unliked": config.unliked_icon,
            "left": config.layout.left,
            "top": config.layout.top,
            "inset": config.layout.inset,
        },
        "burst": {
            "duration_ms": b.duration_ms,
            "particle_count": list(b.particle_count),
            "target_distance": list(b.target_distance),
            "size": list(b.size),
            "angle": list(b.angle),
            "color": list(b.color),
            "seed": config.seed,
        },
    }


def dump_config(config: ViewConfig, path: str) -> None:
    header = "// likeview config (JSONC). Comments are allowed.\n"
    with open(path, "w", encoding="utf-8") as f:
        f.write(header)
        json.dump(config_to_dict(config), f, indent=2)
        f.write("\n")
