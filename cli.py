import asyncio
from typing import Optional

import httpx
import typer
import uvicorn

from src.core import exceptions

app = typer.Typer(help="PrepTive site management CLI.")


# ---------------------------
# Commands
# ---------------------------
@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Port"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
):
    """Run the site."""
    uvicorn.run("src.main:app", host=host, port=port, reload=reload, log_level="info")


@app.command()
def edge(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8001, help="Port"),
):
    """Run the standalone media proxy."""
    uvicorn.run("src.edge:app", host=host, port=port, log_level="info")


@app.command()
def init_db():
    """Create all tables."""
    from src.core.database import create_tables

    asyncio.run(create_tables())
    print("✅ Tables created")


@app.command()
def seed():
    """Create tables and insert sample posts, authors and exams."""
    from src.apps.blog.seed import seed_sample_content
    from src.core.database import create_tables

    async def run() -> int:
        await create_tables()
        return await seed_sample_content()

    created = asyncio.run(run())
    if created:
        print(f"✅ Inserted {created} sample posts")
    else:
        print("📁 Posts table is not empty, nothing inserted")


@app.command()
def list_posts(limit: int = typer.Option(20, help="How many posts to show")):
    """List the latest published posts."""
    from src.apps.blog.models import PostStatus
    from src.apps.blog.routers.post_router import get_post_repository

    async def run():
        repository = get_post_repository()
        total = await repository.count(status=PostStatus.PUBLISHED.value)
        return total, await repository.list_published(limit=limit)

    total, posts = asyncio.run(run())
    print(f"📁 {total} published posts")
    for post in posts:
        published = post.published_at.date().isoformat() if post.published_at else "-"
        print(f"  📄 {published}  {post.slug}  {post.title}")


@app.command()
def media_url(path: str):
    """Print the storage URL the media proxy would fetch for PATH."""
    from src.apps.media.services.media_proxy import build_target_url

    if not path.startswith("/"):
        path = "/" + path
    print(build_target_url(path))


@app.command()
def contact(
    name: str = typer.Option(..., "--name", "-n"),
    email: str = typer.Option(..., "--email", "-e"),
    message: str = typer.Option(..., "--message", "-m"),
    grade: Optional[str] = typer.Option(None, "--grade"),
    exam: Optional[str] = typer.Option(None, "--exam"),
    base_url: str = typer.Option("http://127.0.0.1:8000", help="Site to submit to"),
):
    """Submit the contact form to a running site."""
    from src.apps.contact.services.form_client import ContactFormClient

    async def run():
        async with httpx.AsyncClient(base_url=base_url) as client:
            form = ContactFormClient(client).fill(
                name=name, email=email, grade=grade, exam=exam, message=message
            )
            return await form.submit()

    try:
        status = asyncio.run(run())
    except exceptions.ValidationException as e:
        print(f"❌ {e.detail}")
        raise typer.Exit(1)

    if status.type == "success":
        print(f"✅ {status.message}")
    else:
        print(f"❌ {status.message}")
        raise typer.Exit(1)


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()
