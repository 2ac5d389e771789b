# cli.py
import logging
import mimetypes
import sys
from pathlib import Path

import click

from hotel_admin.clients import RoomTypesClient
from hotel_admin.settings import get_settings
from hotel_admin.storage_adapter import FileUpload, StorageAdapter

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", is_flag=True, help="Log at DEBUG level")
def cli(verbose):
    """CLI commands for hotel admin media and records"""
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@cli.command()
def show_config():
    """Show current configuration (secrets are never printed)"""
    click.echo("Current Configuration:")
    for key, value in get_settings().describe().items():
        click.echo(f"  {key}: {value}")


@cli.command()
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--path", "upload_path", required=True, help="Destination prefix, e.g. services/spa")
@click.option("--max-size-mb", type=int, default=None, help="Reject files larger than this")
@click.option("--allow", "allowed", multiple=True, help="Allowed extension (repeatable)")
def upload(file_path, upload_path, max_size_mb, allowed):
    """Upload a local file to the media bucket"""
    settings = get_settings()
    content_type, _ = mimetypes.guess_type(file_path.name)
    result = StorageAdapter(settings).upload(
        FileUpload(name=file_path.name, content=file_path.read_bytes(), content_type=content_type),
        path=upload_path,
        max_size_bytes=max_size_mb * 1024 * 1024 if max_size_mb else settings.max_upload_size_bytes,
        check_file_type=bool(allowed) or settings.check_upload_types,
        allowed_file_types=list(allowed) or settings.allowed_upload_types,
    )
    if result.success:
        click.echo(f"✅ Uploaded: {result.file_url}")
    else:
        click.echo(f"❌ Upload failed: {result.message}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("object_key")
def delete(object_key):
    """Delete an object from the media bucket by key"""
    result = StorageAdapter(get_settings()).remove(object_key)
    if result.success:
        click.echo(f"✅ Deleted: {object_key}")
    else:
        click.echo(f"❌ Delete failed: {result.error}", err=True)
        sys.exit(1)


@cli.command()
@click.option("--base-url", default=None, help="Admin API host; resolved from settings when omitted")
def list_room_types(base_url):
    """List room types from the admin API"""
    client = RoomTypesClient(get_settings(), base_url=base_url)
    room_types = client.list()
    if client.last_failure:
        click.echo(f"❌ Could not fetch room types ({client.last_failure.value})", err=True)
        sys.exit(1)
    for room_type in room_types:
        status = "active" if room_type.active else "hidden"
        click.echo(f"{room_type.id}\t{room_type.name_en} / {room_type.name_tr}\t{status}")


@cli.command()
@click.argument("room_type_id")
@click.option("--base-url", default=None, help="Admin API host; resolved from settings when omitted")
def toggle_room_type(room_type_id, base_url):
    """Show or hide a room type on the website"""
    client = RoomTypesClient(get_settings(), base_url=base_url)
    if client.toggle_visibility(room_type_id):
        click.echo(f"✅ Toggled visibility of room type {room_type_id}")
    else:
        reason = client.last_failure.value if client.last_failure else "unknown"
        click.echo(f"❌ Could not toggle room type {room_type_id} ({reason})", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
