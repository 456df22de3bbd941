from typer.testing import CliRunner

from cli import app

runner = CliRunner()


def test_media_url_command():
    result = runner.invoke(app, ["media-url", "images/a.png"])
    assert result.exit_code == 0
    assert result.output.strip() == (
        "https://gwptkkewewqekdmqowbl.supabase.co/storage/v1/object/public/media/images/a.png"
    )


def test_contact_command_rejects_blank_message():
    result = runner.invoke(
        app, ["contact", "--name", "Asha", "--email", "asha@example.com", "--message", " "]
    )
    assert result.exit_code == 1
    assert "message" in result.output
