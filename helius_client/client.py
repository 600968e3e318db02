from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence

from .base_client import BaseClient
from .deadline import Deadline
from .models import (
    Asset,
    AssetsByOwnerOptions,
    AssetsPage,
    CreateWebhookRequest,
    GetPriorityFeeOptions,
    GetTokenHoldersOptions,
    PriorityFeeEstimate,
    SearchAssetsOptions,
    TokenHolder,
    TokenHoldersPage,
    UpdateWebhookRequest,
    Webhook,
    WebhookType,
)
from .pagination import collect_all

TOKEN_HOLDERS_MAX_LIMIT = 10000

_DISPLAY_FLAGS = {
    'show_fungible': 'showFungible',
    'show_native_balance': 'showNativeBalance',
    'show_unverified_collections': 'showUnverifiedCollections',
    'show_collection_metadata': 'showCollectionMetadata',
    'show_grand_total': 'showGrandTotal',
    'show_zero_balance': 'showZeroBalance',
}

_SEARCH_FIELDS = {
    'owner_address': 'ownerAddress',
    'creator_address': 'creatorAddress',
    'creator_verified': 'creatorVerified',
    'authority_address': 'authorityAddress',
    'group_key': 'groupKey',
    'group_value': 'groupValue',
    'delegate': 'delegate',
    'frozen': 'frozen',
    'compressed': 'compressed',
    'burnt': 'burnt',
    'interface': 'interface',
    'token_type': 'tokenType',
    'json_uri': 'jsonUri',
}


def _paging(body: Dict[str, Any], page: int, limit: int, cursor: Optional[str]) -> None:
    if page > 0:
        body['page'] = page
    if limit > 0:
        body['limit'] = limit
    if cursor:
        body['cursor'] = cursor


def _fee_options(opts: Optional[GetPriorityFeeOptions], *, for_transaction: bool) -> Dict[str, Any]:
    if opts is None:
        return {}
    options: Dict[str, Any] = {}
    if for_transaction and opts.transaction_encoding:
        options['transactionEncoding'] = opts.transaction_encoding
    if opts.priority_level:
        options['priorityLevel'] = opts.priority_level.value
    if opts.include_all_priority_fee_levels:
        options['includeAllPriorityFeeLevels'] = True
    if opts.lookback_slots > 0:
        options['lookbackSlots'] = opts.lookback_slots
    if opts.include_vote:
        options['includeVote'] = True
    if opts.recommended:
        options['recommended'] = True
    if for_transaction and opts.evaluate_empty_slot_as_zero:
        options['evaluateEmptySlotAsZero'] = True
    return options


class HeliusClient(BaseClient):
    """Helius API client: DAS assets, webhooks, token holders, priority fees.

    Usage example:
        client = HeliusClient('your-api-key', network='devnet', timeout=30)
        page = client.get_assets_by_owner('wallet-address')
    """

    # --- DAS ---

    def get_asset(self, asset_id: str, *, deadline: Optional[Deadline] = None) -> Asset:
        op = 'get_asset'
        self._require(asset_id, 'asset ID is required', '/assets', op)
        body = self._post('/assets', {'id': asset_id}, operation=op, deadline=deadline)
        asset = self._decode(body, Asset, operation=op)
        self.logger.debug('fetched asset id=%s interface=%s', asset_id, asset.interface)
        return asset

    def get_assets_by_owner(self, owner_address: str, options: Optional[AssetsByOwnerOptions] = None, *, deadline: Optional[Deadline] = None) -> AssetsPage:
        op = 'get_assets_by_owner'
        self._require(owner_address, 'owner address is required', '/assets', op)
        req: Dict[str, Any] = {'ownerAddress': owner_address}
        if options is not None:
            _paging(req, options.page, options.limit, options.cursor)
            if options.before:
                req['before'] = options.before
            if options.after:
                req['after'] = options.after
            display = {wire: True for attr, wire in _DISPLAY_FLAGS.items() if getattr(options, attr)}
            if display:
                req['displayOptions'] = display
            if options.sort_by is not None:
                req['sortBy'] = options.sort_by.model_dump(by_alias=True)
        body = self._post('/assets', req, operation=op, deadline=deadline)
        page = self._decode(body, AssetsPage, operation=op)
        self.logger.debug('fetched assets by owner owner=%s total=%d returned=%d', owner_address, page.total, len(page.items))
        return page

    def search_assets(self, options: Optional[SearchAssetsOptions], *, deadline: Optional[Deadline] = None) -> AssetsPage:
        op = 'search_assets'
        self._require(options, 'search options are required', '/assets/search', op)
        req: Dict[str, Any] = {}
        _paging(req, options.page, options.limit, options.cursor)
        for attr, wire in _SEARCH_FIELDS.items():
            value = getattr(options, attr)
            if value is not None and value != '':
                req[wire] = value
        if options.sort_by is not None:
            req['sortBy'] = options.sort_by.model_dump(by_alias=True)
        body = self._post('/assets/search', req, operation=op, deadline=deadline)
        page = self._decode(body, AssetsPage, operation=op)
        self.logger.debug('searched assets total=%d returned=%d', page.total, len(page.items))
        return page

    def get_asset_batch(self, ids: Sequence[str], *, deadline: Optional[Deadline] = None) -> List[Asset]:
        op = 'get_asset_batch'
        if not ids:
            return []
        body = self._post('/assets/batch', {'ids': list(ids)}, operation=op, deadline=deadline)
        assets = self._decode(body, List[Asset], operation=op)
        self.logger.debug('fetched asset batch requested=%d returned=%d', len(ids), len(assets))
        return assets

    # --- Webhooks ---

    def create_webhook(self, request: Optional[CreateWebhookRequest], *, deadline: Optional[Deadline] = None) -> Webhook:
        op = 'create_webhook'
        path = '/webhooks'
        self._require(request, 'request is required', path, op)
        self._require(request.webhook_url, 'webhookURL is required', path, op)
        self._require(request.transaction_types, 'at least one transactionType is required', path, op)
        self._require(request.account_addresses, 'at least one accountAddress is required', path, op)
        if request.webhook_type is None:
            request = request.model_copy(update={'webhook_type': WebhookType.ENHANCED})
        body = self._post(path, request, operation=op, deadline=deadline)
        webhook = self._decode(body, Webhook, operation=op)
        self.logger.info('created webhook webhook_id=%s url=%s addresses=%d', webhook.webhook_id, webhook.webhook_url, len(webhook.account_addresses))
        return webhook

    def get_webhook(self, webhook_id: str, *, deadline: Optional[Deadline] = None) -> Webhook:
        op = 'get_webhook'
        self._require(webhook_id, 'webhookID is required', '/webhooks', op)
        body = self._get(f"/webhooks/{webhook_id}", operation=op, deadline=deadline)
        return self._decode(body, Webhook, operation=op)

    def list_webhooks(self, *, deadline: Optional[Deadline] = None) -> List[Webhook]:
        op = 'list_webhooks'
        body = self._get('/webhooks', operation=op, deadline=deadline)
        webhooks = self._decode(body, List[Webhook], operation=op)
        self.logger.debug('listed webhooks count=%d', len(webhooks))
        return webhooks

    def update_webhook(self, webhook_id: str, request: Optional[UpdateWebhookRequest], *, deadline: Optional[Deadline] = None) -> Webhook:
        op = 'update_webhook'
        self._require(webhook_id, 'webhookID is required', '/webhooks', op)
        self._require(request, 'request is required', '/webhooks', op)
        body = self._put(f"/webhooks/{webhook_id}", request, operation=op, deadline=deadline)
        webhook = self._decode(body, Webhook, operation=op)
        self.logger.info('updated webhook webhook_id=%s', webhook_id)
        return webhook

    def delete_webhook(self, webhook_id: str, *, deadline: Optional[Deadline] = None) -> None:
        op = 'delete_webhook'
        self._require(webhook_id, 'webhookID is required', '/webhooks', op)
        self._delete(f"/webhooks/{webhook_id}", operation=op, deadline=deadline)
        self.logger.info('deleted webhook webhook_id=%s', webhook_id)

    # --- Token holders ---

    def get_token_holders(self, mint: str, options: Optional[GetTokenHoldersOptions] = None, *, deadline: Optional[Deadline] = None) -> TokenHoldersPage:
        return self._token_holders_page(mint, options, operation='get_token_holders', deadline=deadline)

    def _token_holders_page(self, mint: str, options: Optional[GetTokenHoldersOptions], *, operation: str, deadline: Optional[Deadline]) -> TokenHoldersPage:
        self._require(mint, 'mint address is required', '/token-holders', operation)
        req: Dict[str, Any] = {'mint': mint}
        if options is not None:
            _paging(req, 0, options.limit, options.cursor)
        body = self._post('/token-holders', req, operation=operation, deadline=deadline)
        page = self._decode(body, TokenHoldersPage, operation=operation)
        self.logger.debug('fetched token holders mint=%s total=%d returned=%d', mint, page.total, len(page.token_holders))
        return page

    def get_all_token_holders(self, mint: str, *, max_pages: Optional[int] = None, deadline: Optional[Deadline] = None) -> List[TokenHolder]:
        """Fetch every holder of ``mint`` by following cursors.

        Unbounded in round-trips and memory for widely held tokens; use
        get_token_holders to page manually when that matters.
        """
        op = 'get_all_token_holders'
        self._require(mint, 'mint address is required', '/token-holders', op)

        def fetch(cursor: Optional[str]):
            opts = GetTokenHoldersOptions(cursor=cursor, limit=TOKEN_HOLDERS_MAX_LIMIT)
            return self._token_holders_page(mint, opts, operation=op, deadline=deadline).as_page()

        holders = collect_all(fetch, max_pages=max_pages)
        self.logger.info('fetched all token holders mint=%s total=%d', mint, len(holders))
        return holders

    # --- Priority fees ---

    def get_priority_fee_estimate(self, account_keys: Sequence[str], options: Optional[GetPriorityFeeOptions] = None, *, deadline: Optional[Deadline] = None) -> PriorityFeeEstimate:
        op = 'get_priority_fee_estimate'
        self._require(account_keys, 'at least one account key is required', '/priority-fee', op)
        req: Dict[str, Any] = {'accountKeys': list(account_keys)}
        fee_opts = _fee_options(options, for_transaction=False)
        if fee_opts:
            req['options'] = fee_opts
        body = self._post('/priority-fee', req, operation=op, deadline=deadline)
        estimate = self._decode(body, PriorityFeeEstimate, operation=op)
        self.logger.debug('got priority fee estimate fee=%s accounts=%d', estimate.priority_fee_estimate, len(account_keys))
        return estimate

    def get_priority_fee_estimate_for_transaction(self, transaction: str, options: Optional[GetPriorityFeeOptions] = None, *, deadline: Optional[Deadline] = None) -> PriorityFeeEstimate:
        op = 'get_priority_fee_estimate_for_transaction'
        self._require(transaction, 'transaction is required', '/priority-fee', op)
        req: Dict[str, Any] = {'transaction': transaction}
        fee_opts = _fee_options(options, for_transaction=True)
        if fee_opts:
            req['options'] = fee_opts
        body = self._post('/priority-fee', req, operation=op, deadline=deadline)
        estimate = self._decode(body, PriorityFeeEstimate, operation=op)
        self.logger.debug('got priority fee estimate for transaction fee=%s', estimate.priority_fee_estimate)
        return estimate
