from __future__ import annotations

import argparse
import logging

from har_tidy.data_processing.errors import HarDataError
from har_tidy.data_processing.preprocess_har import preprocess_har
from har_tidy.utils.config import apply_overrides, load_config
from har_tidy.utils.logging import setup_logging

log = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Build the tidy and averaged UCI HAR tables.")
    p.add_argument("--config", required=True, help="Path to YAML config (supports extends).")
    p.add_argument("--raw-dir", default=None, help="Override datasets.har.raw_dir.")
    p.add_argument("--outdir", default=None, help="Override output.dir.")
    p.add_argument("--log-level", default=None, help="Override logging.level (DEBUG, INFO, ...).")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    cfg = load_config(args.config)
    cfg = apply_overrides(cfg, raw_dir=args.raw_dir, out_dir=args.outdir, log_level=args.log_level)
    setup_logging(level=cfg.get("logging", {}).get("level", "INFO"))

    try:
        out = preprocess_har(cfg)
    except HarDataError as e:
        log.error("HAR preprocessing failed: %s", e)
        raise

    for name, path in out["paths"].items():
        log.info("%s: %s", name, path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
