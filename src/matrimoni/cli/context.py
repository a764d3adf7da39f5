import typer

from ..accounts.directory import AccountDirectory
from ..biodata.directory import ProfileDirectory
from ..config import get_data_dir
from ..services.account import AccountService
from ..services.biodata import BiodataService
from ..storage.store import KeyValueStore


def get_store(ctx: typer.Context) -> KeyValueStore:
    """the store opened by the top-level callback, or the configured default."""
    root = ctx.find_root()
    if isinstance(root.obj, KeyValueStore):
        return root.obj
    store = KeyValueStore(get_data_dir())
    root.obj = store
    return store


def get_account_service(ctx: typer.Context) -> AccountService:
    return AccountService(AccountDirectory(get_store(ctx)))


def get_biodata_service(ctx: typer.Context) -> BiodataService:
    store = get_store(ctx)
    return BiodataService(AccountDirectory(store), ProfileDirectory(store))
