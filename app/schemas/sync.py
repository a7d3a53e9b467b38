from datetime import datetime
from typing import Optional
from app.schemas.common import ApiModel


class SyncDebugInfo(ApiModel):
    has_table: bool
    has_item_rows: bool
    has_item_cells: bool
    row_match_count: int
    discarded_rows: int
    html_length: int
    table_sample: str


class SyncReport(ApiModel):
    success: bool
    synced: Optional[int] = None
    total: Optional[int] = None
    discarded: Optional[int] = None
    errors: Optional[list[str]] = None
    timestamp: Optional[datetime] = None
    error: Optional[str] = None
    debug: Optional[SyncDebugInfo] = None


class SyncStatusResponse(ApiModel):
    last_sync: Optional[datetime] = None
    has_synced_data: bool


class MainStreetDebugResponse(ApiModel):
    status: int
    content_type: Optional[str] = None
    html_length: int
    has_table: bool
    has_item_rows: bool
    row_match_count: int
    first_rows: list[str]
    html_sample: str
