"""Shared API dependencies for the document store and media storage."""

from typing import Annotated

from fastapi import Depends

from skillhub.db.session import get_store
from skillhub.db.store import JsonStore
from skillhub.services.media import MediaStorage, get_media_storage

# Type alias for the document store dependency
StoreDep = Annotated[JsonStore, Depends(get_store)]

# Type alias for the media storage dependency
MediaDep = Annotated[MediaStorage, Depends(get_media_storage)]
