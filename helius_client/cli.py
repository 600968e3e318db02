"""Command-line fetcher for Helius data.

Examples:
  helius-fetch --resource asset --id F9Lw3ki3hJ7PF9HQXsBzoY8GyE6sPoEZZdXJBsTTD2rk
  helius-fetch --resource owner-assets --owner 86xCnPeV69n6t3DnyGvkKobf9FdN2H9oiVDdaMpo2MMY --limit 50 --out data/assets.json
  helius-fetch --resource holders --mint EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v --all --out data/holders.json
  helius-fetch --resource webhooks
  helius-fetch --resource priority-fee --accounts JUP4Fb2cqiRUcaTHdrPC8h2gNsA2ETXiPDD33WcGuJB --level High

Credentials and endpoints come from HELIUS_* environment variables or a local .env.
"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel

from .client import HeliusClient
from .config import ClientConfig, Network, load_env_file
from .deadline import Deadline
from .exceptions import ApiRequestError, as_api_error
from .models import AssetsByOwnerOptions, GetPriorityFeeOptions, GetTokenHoldersOptions, PriorityLevel

RESOURCES = ['asset', 'owner-assets', 'holders', 'webhooks', 'priority-fee']


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog='helius-fetch', description='Fetch data from the Helius API')
    p.add_argument('--resource', required=True, choices=RESOURCES)
    p.add_argument('--network', choices=[n.value for n in Network])
    p.add_argument('--id', help='Asset ID for --resource asset')
    p.add_argument('--owner', help='Owner address for --resource owner-assets')
    p.add_argument('--mint', help='Mint address for --resource holders')
    p.add_argument('--accounts', help='Comma separated account keys for --resource priority-fee')
    p.add_argument('--level', choices=[lvl.value for lvl in PriorityLevel])
    p.add_argument('--limit', type=int, default=0)
    p.add_argument('--all', action='store_true', help='Follow cursors and fetch every page (holders)')
    p.add_argument('--deadline', type=float, help='Overall deadline in seconds')
    p.add_argument('--out', help='Output JSON file path (default: stdout)')
    p.add_argument('--env-file', default='.env')
    p.add_argument('--verbose', action='store_true')
    return p.parse_args(argv)


def _jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode='json', by_alias=True, exclude_none=True)
    if isinstance(data, list):
        return [_jsonable(x) for x in data]
    return data


def fetch(client: HeliusClient, args: argparse.Namespace) -> Any:
    deadline = Deadline(args.deadline) if args.deadline else None
    resource = args.resource
    if resource == 'asset':
        return client.get_asset(args.id or '', deadline=deadline)
    if resource == 'owner-assets':
        return client.get_assets_by_owner(args.owner or '', AssetsByOwnerOptions(limit=args.limit), deadline=deadline)
    if resource == 'holders':
        if args.all:
            return client.get_all_token_holders(args.mint or '', deadline=deadline)
        return client.get_token_holders(args.mint or '', GetTokenHoldersOptions(limit=args.limit), deadline=deadline)
    if resource == 'webhooks':
        return client.list_webhooks(deadline=deadline)
    if resource == 'priority-fee':
        keys = [x.strip() for x in (args.accounts or '').split(',') if x.strip()]
        opts = GetPriorityFeeOptions(priority_level=PriorityLevel(args.level) if args.level else None)
        return client.get_priority_fee_estimate(keys, opts, deadline=deadline)
    raise SystemExit(f'Unsupported resource: {resource}')


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format='[%(levelname)s] %(message)s')
    load_env_file(Path(args.env_file))
    overrides = {'network': args.network} if args.network else {}
    try:
        with HeliusClient(config=ClientConfig.from_env(**overrides)) as client:
            data = fetch(client, args)
    except ApiRequestError as e:
        api_err = as_api_error(e)
        if api_err is not None and api_err.is_unauthorized():
            print('error: invalid or missing HELIUS_API_KEY', file=sys.stderr)
        else:
            print(f'error: {e}', file=sys.stderr)
        return 1
    except ValueError as e:
        print(f'error: invalid configuration: {e}', file=sys.stderr)
        return 1
    text = json.dumps(_jsonable(data), ensure_ascii=False, indent=2)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding='utf-8')
        if args.verbose:
            print(f'[done] Wrote {out_path}', file=sys.stderr)
    else:
        print(text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
