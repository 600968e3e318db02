"""Pydantic schemas for Helius request options and response payloads.

Response models accept unknown fields so upstream additions do not break
decoding. Field names follow Python conventions; aliases carry the wire name.
"""
from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .pagination import Page

__all__ = [
    'AssetFile',
    'AssetContent',
    'Authority',
    'Compression',
    'Grouping',
    'Royalty',
    'Ownership',
    'Supply',
    'Price',
    'TokenInfo',
    'Asset',
    'NativeBalance',
    'AssetsPage',
    'SortBy',
    'AssetsByOwnerOptions',
    'SearchAssetsOptions',
    'WebhookType',
    'TransactionType',
    'Webhook',
    'CreateWebhookRequest',
    'UpdateWebhookRequest',
    'RawTokenAmount',
    'TokenBalanceChange',
    'AccountData',
    'NativeTransfer',
    'TokenTransfer',
    'WebhookEvent',
    'TokenHolder',
    'TokenHoldersPage',
    'GetTokenHoldersOptions',
    'PriorityLevel',
    'PriorityFeeLevels',
    'PriorityFeeEstimate',
    'GetPriorityFeeOptions',
]


class _Wire(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='allow')


class _Options(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='forbid')


# --- DAS (digital assets) ---

class AssetFile(_Wire):
    uri: str = ''
    mime: Optional[str] = None
    cdn: bool = False


class AssetContent(_Wire):
    schema_url: Optional[str] = Field(default=None, alias='$schema')
    json_uri: Optional[str] = None
    files: List[AssetFile] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    links: Dict[str, Optional[str]] = Field(default_factory=dict)


class Authority(_Wire):
    address: str
    scopes: List[str] = Field(default_factory=list)


class Compression(_Wire):
    eligible: bool = False
    compressed: bool = False
    data_hash: Optional[str] = None
    creator_hash: Optional[str] = None
    asset_hash: Optional[str] = None
    tree: Optional[str] = None
    seq: int = 0
    leaf_id: int = 0


class Grouping(_Wire):
    group_key: str
    group_value: str


class Royalty(_Wire):
    royalty_model: str = ''
    target: Optional[str] = None
    percent: float = 0.0
    basis_points: int = 0
    primary_sale_happened: bool = False
    locked: bool = False


class Ownership(_Wire):
    frozen: bool = False
    delegated: bool = False
    delegate: Optional[str] = None
    ownership_model: str = ''
    owner: str = ''


class Supply(_Wire):
    print_max_supply: Optional[int] = None
    print_current_supply: Optional[int] = None
    edition_nonce: Optional[int] = None


class Price(_Wire):
    price_per_token: float = 0.0
    total_price: Optional[float] = None
    currency: Optional[str] = None


class TokenInfo(_Wire):
    symbol: Optional[str] = None
    balance: Optional[int] = None
    supply: Optional[int] = None
    decimals: Optional[int] = None
    token_program: Optional[str] = None
    associated_token_address: Optional[str] = None
    price_info: Optional[Price] = None


class Asset(_Wire):
    id: str
    interface: str = ''
    content: Optional[AssetContent] = None
    authorities: List[Authority] = Field(default_factory=list)
    compression: Optional[Compression] = None
    grouping: List[Grouping] = Field(default_factory=list)
    royalty: Optional[Royalty] = None
    ownership: Optional[Ownership] = None
    supply: Optional[Supply] = None
    token_info: Optional[TokenInfo] = None
    mutable: bool = False
    burnt: bool = False


class NativeBalance(_Wire):
    lamports: int = 0
    price_per_sol: Optional[float] = None
    total_price: Optional[float] = None


class AssetsPage(_Wire):
    total: int = 0
    limit: int = 0
    page: Optional[int] = None
    cursor: Optional[str] = None
    items: List[Asset] = Field(default_factory=list)
    native_balance: Optional[NativeBalance] = Field(default=None, alias='nativeBalance')

    def as_page(self) -> Page[Asset]:
        return Page(items=list(self.items), total=self.total, limit=self.limit, cursor=self.cursor)


class SortBy(_Options):
    sort_by: str = Field(alias='sortBy')  # created, updated, recent_action
    sort_direction: str = Field(default='desc', alias='sortDirection')


class AssetsByOwnerOptions(_Options):
    page: int = 0
    limit: int = 0
    cursor: Optional[str] = None
    before: Optional[str] = None
    after: Optional[str] = None
    show_fungible: bool = False
    show_native_balance: bool = False
    show_unverified_collections: bool = False
    show_collection_metadata: bool = False
    show_grand_total: bool = False
    show_zero_balance: bool = False
    sort_by: Optional[SortBy] = None


class SearchAssetsOptions(_Options):
    page: int = 0
    limit: int = 0
    cursor: Optional[str] = None
    owner_address: Optional[str] = None
    creator_address: Optional[str] = None
    creator_verified: Optional[bool] = None
    authority_address: Optional[str] = None
    group_key: Optional[str] = None
    group_value: Optional[str] = None
    delegate: Optional[str] = None
    frozen: Optional[bool] = None
    compressed: Optional[bool] = None
    burnt: Optional[bool] = None
    interface: Optional[str] = None
    token_type: Optional[str] = None
    json_uri: Optional[str] = None
    sort_by: Optional[SortBy] = None


# --- Webhooks ---

class WebhookType(str, Enum):
    ENHANCED = 'enhanced'
    RAW = 'raw'
    DISCORD = 'discord'


class TransactionType(str, Enum):
    ANY = 'ANY'
    SWAP = 'SWAP'
    TRANSFER = 'TRANSFER'
    NFT_SALE = 'NFT_SALE'
    NFT_LISTING = 'NFT_LISTING'
    NFT_MINT = 'NFT_MINT'
    NFT_BID = 'NFT_BID'
    NFT_CANCEL_LISTING = 'NFT_CANCEL_LISTING'


class Webhook(_Wire):
    webhook_id: str = Field(alias='webhookID')
    wallet: str = ''
    webhook_url: str = Field(default='', alias='webhookURL')
    # Plain strings: upstream knows more transaction types than the enum lists.
    transaction_types: List[str] = Field(default_factory=list, alias='transactionTypes')
    account_addresses: List[str] = Field(default_factory=list, alias='accountAddresses')
    webhook_type: str = Field(default='', alias='webhookType')
    auth_header: Optional[str] = Field(default=None, alias='authHeader')


class CreateWebhookRequest(_Options):
    webhook_url: str = Field(alias='webhookURL')
    transaction_types: List[TransactionType] = Field(default_factory=list, alias='transactionTypes')
    account_addresses: List[str] = Field(default_factory=list, alias='accountAddresses')
    webhook_type: Optional[WebhookType] = Field(default=None, alias='webhookType')
    auth_header: Optional[str] = Field(default=None, alias='authHeader')


class UpdateWebhookRequest(_Options):
    webhook_url: Optional[str] = Field(default=None, alias='webhookURL')
    transaction_types: Optional[List[TransactionType]] = Field(default=None, alias='transactionTypes')
    account_addresses: Optional[List[str]] = Field(default=None, alias='accountAddresses')
    webhook_type: Optional[WebhookType] = Field(default=None, alias='webhookType')
    auth_header: Optional[str] = Field(default=None, alias='authHeader')


class RawTokenAmount(_Wire):
    decimals: int = 0
    token_amount: str = Field(default='0', alias='tokenAmount')


class TokenBalanceChange(_Wire):
    mint: str = ''
    raw_token_amount: Optional[RawTokenAmount] = Field(default=None, alias='rawTokenAmount')
    token_account: str = Field(default='', alias='tokenAccount')
    user_account: str = Field(default='', alias='userAccount')


class AccountData(_Wire):
    account: str
    native_balance_change: int = Field(default=0, alias='nativeBalanceChange')
    token_balance_changes: List[TokenBalanceChange] = Field(default_factory=list, alias='tokenBalanceChanges')


class NativeTransfer(_Wire):
    amount: int = 0
    from_user_account: str = Field(default='', alias='fromUserAccount')
    to_user_account: str = Field(default='', alias='toUserAccount')


class TokenTransfer(_Wire):
    from_token_account: str = Field(default='', alias='fromTokenAccount')
    from_user_account: str = Field(default='', alias='fromUserAccount')
    mint: str = ''
    to_token_account: str = Field(default='', alias='toTokenAccount')
    to_user_account: str = Field(default='', alias='toUserAccount')
    token_amount: float = Field(default=0.0, alias='tokenAmount')
    token_standard: Optional[str] = Field(default=None, alias='tokenStandard')


class WebhookEvent(_Wire):
    signature: str
    slot: int = 0
    account_data: List[AccountData] = Field(default_factory=list, alias='accountData')
    description: Optional[str] = None
    events: Any = None
    fee: int = 0
    fee_payer: Optional[str] = Field(default=None, alias='feePayer')
    instructions: List[Any] = Field(default_factory=list)
    native_transfers: List[NativeTransfer] = Field(default_factory=list, alias='nativeTransfers')
    source: Optional[str] = None
    timestamp: Optional[int] = None
    token_transfers: List[TokenTransfer] = Field(default_factory=list, alias='tokenTransfers')
    type: Optional[str] = None


# --- Token holders ---

class TokenHolder(_Wire):
    owner: str
    token_account: str = Field(default='', alias='tokenAccount')
    balance: int = 0
    decimals: int = 0


class TokenHoldersPage(_Wire):
    total: int = 0
    limit: int = 0
    cursor: Optional[str] = None
    token_holders: List[TokenHolder] = Field(default_factory=list)

    def as_page(self) -> Page[TokenHolder]:
        return Page(items=list(self.token_holders), total=self.total, limit=self.limit, cursor=self.cursor)


class GetTokenHoldersOptions(_Options):
    cursor: Optional[str] = None
    limit: int = 0  # server default 1000, max 10000


# --- Priority fees ---

class PriorityLevel(str, Enum):
    MIN = 'Min'
    LOW = 'Low'
    MEDIUM = 'Medium'
    HIGH = 'High'
    VERY_HIGH = 'VeryHigh'
    UNSAFE_MAX = 'UnsafeMax'


class PriorityFeeLevels(_Wire):
    min: float = 0.0
    low: float = 0.0
    medium: float = 0.0
    high: float = 0.0
    very_high: float = Field(default=0.0, alias='veryHigh')
    unsafe_max: float = Field(default=0.0, alias='unsafeMax')


class PriorityFeeEstimate(_Wire):
    priority_fee_estimate: float = Field(default=0.0, alias='priorityFeeEstimate')
    priority_fee_levels: Optional[PriorityFeeLevels] = Field(default=None, alias='priorityFeeLevels')


class GetPriorityFeeOptions(_Options):
    transaction_encoding: Optional[str] = None  # base58 or base64
    priority_level: Optional[PriorityLevel] = None
    include_all_priority_fee_levels: bool = False
    lookback_slots: int = 0
    include_vote: bool = False
    recommended: bool = False
    evaluate_empty_slot_as_zero: bool = False
