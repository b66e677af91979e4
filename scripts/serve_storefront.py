import argparse
import json

import uvicorn

from theme_cart.log import configure_logging
from theme_cart.settings import settings
from theme_cart.storefront import create_app

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", default=None, help="JSON file with the initial cart state")
    ap.add_argument("--host", default=settings.api_host)
    ap.add_argument("--port", type=int, default=settings.api_port)
    args = ap.parse_args()
    configure_logging()
    seed = None
    if args.seed:
        with open(args.seed, "r", encoding="utf-8") as f:
            seed = json.load(f)
    uvicorn.run(create_app(seed), host=args.host, port=args.port)
