#!/usr/bin/env python3
"""
HRM 工资细胞启动入口。
用法:
  hrm-payroll               # 控制台菜单（默认）
  hrm-payroll console
  hrm-payroll serve --port 8004
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import configure_logging, settings


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hrm-payroll", description="员工/部门记录管理与工资计算")
    sub = ap.add_subparsers(dest="command")
    sub.add_parser("console", help="交互式控制台菜单（默认）")
    serve = sub.add_parser("serve", help="以 HTTP 服务方式运行（FastAPI + Uvicorn）")
    serve.add_argument("--host", default=settings.HOST, help="监听地址")
    serve.add_argument("--port", type=int, default=settings.PORT, help="监听端口")
    return ap


def run_console() -> int:
    from .console import Console
    from .service import HRMService

    configure_logging("WARNING")
    return Console(HRMService()).run()


def run_server(host: str, port: int) -> int:
    import uvicorn

    configure_logging("INFO")
    logging.getLogger("hrm.api").info("hrm-payroll serving on %s:%s", host, port)
    uvicorn.run("hrm_payroll.api.app:app", host=host, port=port, reload=False)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        return run_server(args.host, args.port)
    return run_console()


if __name__ == "__main__":
    raise SystemExit(main())
