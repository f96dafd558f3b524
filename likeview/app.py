from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List, Optional

from .config import ViewConfig, dump_config, flatten_config, load_config
from .logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="likeview", description="Like button with a particle burst")

    g_cfg = ap.add_argument_group("Config")
    g_cfg.add_argument("--config", type=str, default=None, help="Config (JSONC) path")
    g_cfg.add_argument("--save_config", type=str, default=None, help="Write the effective config (JSONC) to this path and exit")

    g_win = ap.add_argument_group("Window")
    g_win.add_argument("--w", type=int, default=None)
    g_win.add_argument("--h", type=int, default=None)
    g_win.add_argument("--fps", type=int, default=None)

    g_icon = ap.add_argument_group("Icons")
    g_icon.add_argument("--liked_icon", type=str, default=None, help="Image shown while liked")
    g_icon.add_argument("--unliked_icon", type=str, default=None, help="Image shown while not liked")

    g_burst = ap.add_argument_group("Burst")
    g_burst.add_argument("--seed", type=int, default=None, help="Seed for reproducible bursts")
    g_burst.add_argument("--particle_count", type=int, nargs=2, metavar=("MIN", "MAX"), default=None,
                         help="Inclusive particle count range per burst")
    g_burst.add_argument("--duration_ms", type=int, default=None)

    g_run = ap.add_argument_group("Run")
    g_run.add_argument("--max_frames", type=int, default=None, help="Stop after N frames")
    g_run.add_argument("--auto_trigger", action="store_true", help="Fire one burst on start")
    g_run.add_argument("--record_dir", type=str, default=None, help="Write every frame as PNG into this folder")

    g_log = ap.add_argument_group("Logging")
    g_log.add_argument("--quiet", action="store_true", help="Less console output")
    g_log.add_argument("--debug", action="store_true", help="Debug logging")
    return ap


_CLI_KEYS = ("w", "h", "fps", "liked_icon", "unliked_icon", "seed", "particle_count", "duration_ms")


def resolve_config(args: argparse.Namespace) -> ViewConfig:
    """Config file values, overridden by any CLI flag that was given."""
    flat: Dict[str, Any] = {}
    if args.config:
        flat.update(flatten_config(load_config(args.config)))
    for k in _CLI_KEYS:
        v = getattr(args, k, None)
        if v is not None:
            flat[k] = v
    return ViewConfig.from_flat(flat)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args)
    logger = logging.getLogger(__name__)

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as e:
        logger.error("invalid configuration: %s", e)
        raise

    if args.save_config:
        dump_config(config, args.save_config)
        logger.info("config written to %s", args.save_config)
        return 0

    from .backends.pygame.session import PygameSession

    session = PygameSession(
        config,
        max_frames=args.max_frames,
        auto_trigger=args.auto_trigger,
        record_dir=args.record_dir,
    )
    session.run()
    return 0
