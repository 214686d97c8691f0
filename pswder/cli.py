from __future__ import annotations

import argparse
import json
import logging
import os
from typing import Any, List

from .core import print_report, validate_password
from .breach import check_password_breach_sync


def _dump(obj: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(obj, ensure_ascii=False, indent=2))
    else:
        print(obj)


def main(argv: List[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="pswder", description="pswder: password strength and breach checks.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="Check password strength.")
    p_check.add_argument("password", help="Password to evaluate (not stored).")
    p_check.add_argument("--json", action="store_true")

    p_breach = sub.add_parser("breach", help="Check the password against Pwned Passwords (k-anonymity).")
    p_breach.add_argument("password", help="Password to look up (only a hash prefix is sent).")
    p_breach.add_argument("--json", action="store_true")

    p_serve = sub.add_parser("serve", help="Run FastAPI server.")
    p_serve.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    p_serve.add_argument("--port", type=int, default=int(os.getenv("PORT", "5005")))
    p_serve.add_argument("--reload", action="store_true")

    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "check":
        rep = validate_password(args.password)
        if args.json:
            _dump(rep.to_dict(), True)
        else:
            print_report(rep)
        return

    if args.cmd == "breach":
        res = check_password_breach_sync(args.password)
        if args.json:
            _dump(res.to_dict(), True)
        else:
            _dump(res.message, False)
        return

    if args.cmd == "serve":
        import uvicorn
        from .api import create_app
        app = create_app()
        uvicorn.run(app, host=args.host, port=args.port, reload=args.reload)
        return


if __name__ == "__main__":
    main()
