"""Unit tests for the command-line interface."""

import json

import pytest
import yaml

from sweather import cli
from sweather.gateway.gemini_gateway import GeminiGateway

RECOMMENDATION_JSON = json.dumps({
    "weather": {"summary": "Cold", "temperature": "5°C", "isSweaterWeather": True},
    "selectedItemIds": ["3", "ghost"],
    "reasoning": "Wear the coat.",
})


@pytest.fixture
def config_path(tmp_path):
    """Write a config file pointing the store into tmp_path."""
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.dump({
            "gemini": {"api_key_env": "SWEATHER_TEST_API_KEY"},
            "storage": {"path": str(tmp_path / "store.json"), "key": "cli_wardrobe"},
        }),
        encoding="utf-8",
    )
    return path


def run(config_path, *args):
    return cli.main(["--config", str(config_path), *args])


class TestWardrobeCommands:
    """Test list/add/remove."""

    def test_list_seeds_demo_items(self, config_path, capsys):
        assert run(config_path, "list") == 0

        out = capsys.readouterr().out
        assert "4 item(s)" in out
        assert "Winter Coat" in out
        assert "❄️ Lvl 10" in out

    def test_add_and_remove(self, config_path, capsys):
        assert run(config_path, "add", "--name", "Wool Scarf", "--insulation", "6", "--tags", "wool, red") == 0
        added = capsys.readouterr().out
        assert "✓ Added Wool Scarf" in added
        item_id = added.strip().rsplit("(", 1)[1].rstrip(")")

        run(config_path, "list")
        assert "wool, red" in capsys.readouterr().out

        assert run(config_path, "remove", item_id) == 0
        run(config_path, "list")
        assert "Wool Scarf" not in capsys.readouterr().out

    def test_add_with_image(self, config_path, image_file, tmp_path):
        assert run(config_path, "add", "--name", "Red Hoodie", "--image", str(image_file)) == 0

        stored = json.loads(json.loads((tmp_path / "store.json").read_text(encoding="utf-8"))["cli_wardrobe"])
        assert stored[-1]["imageData"].startswith("data:image/jpeg;base64,")

    def test_add_over_quota(self, tmp_path, capsys):
        """Test an add the store cannot hold reports the limit and fails."""
        path = tmp_path / "small.yaml"
        path.write_text(
            yaml.dump({
                "gemini": {"api_key_env": "SWEATHER_TEST_API_KEY"},
                "storage": {"path": str(tmp_path / "store.json"), "key": "cli_wardrobe", "quota_bytes": 2048},
            }),
            encoding="utf-8",
        )

        assert run(path, "add", "--name", "x" * 3000) == 1
        assert "Storage limit reached" in capsys.readouterr().out

        run(path, "list")
        assert "4 item(s)" in capsys.readouterr().out

    def test_add_blank_name(self, config_path):
        assert run(config_path, "add", "--name", "  ") == 1

    def test_remove_unknown(self, config_path, capsys):
        assert run(config_path, "remove", "nope") == 1
        assert "No item with id nope" in capsys.readouterr().out

    def test_missing_config(self, tmp_path, capsys):
        assert cli.main(["--config", str(tmp_path / "missing.yaml"), "list"]) == 1
        assert "failed" in capsys.readouterr().out


class TestModelCommands:
    """Test commands that call the gateway."""

    def test_missing_api_key(self, config_path, monkeypatch, capsys):
        monkeypatch.delenv("SWEATHER_TEST_API_KEY", raising=False)

        assert run(config_path, "weather", "Oslo") == 1
        assert "SWEATHER_TEST_API_KEY" in capsys.readouterr().out

    def test_recommend(self, config_path, monkeypatch, capsys, make_gateway, gemini_response):
        gateway = make_gateway(
            gemini_response("It is 5°C in Oslo.", uris=("https://yr.no",)),
            gemini_response(RECOMMENDATION_JSON),
        )
        monkeypatch.setattr(cli, "get_gemini_gateway", lambda config: gateway)

        assert run(config_path, "recommend", "Oslo") == 0

        out = capsys.readouterr().out
        assert "📍 Oslo" in out
        assert "Yes! 🧣" in out
        assert "- Winter Coat" in out
        assert "ghost" not in out
        assert "Source 1: https://yr.no" in out

    def test_recommend_failure(self, config_path, monkeypatch, make_gateway):
        gateway = make_gateway(ConnectionError("offline"))
        monkeypatch.setattr(cli, "get_gemini_gateway", lambda config: gateway)

        assert run(config_path, "recommend", "Oslo") == 1

    def test_weather(self, config_path, monkeypatch, capsys, make_gateway, gemini_response):
        gateway = make_gateway(gemini_response("Sunny, 22°C", uris=("https://a", "https://a")))
        monkeypatch.setattr(cli, "get_gemini_gateway", lambda config: gateway)

        assert run(config_path, "weather", "Lisbon") == 0

        out = capsys.readouterr().out
        assert "Sunny, 22°C" in out
        assert out.count("https://a") == 1

    def test_classify(self, config_path, monkeypatch, capsys, image_file, make_gateway, gemini_response):
        gateway = make_gateway(
            gemini_response('{"name": "Red Hoodie", "insulation": 6, "tags": ["cotton"], "color": "red"}')
        )
        monkeypatch.setattr(cli, "get_gemini_gateway", lambda config: gateway)

        assert run(config_path, "classify", str(image_file)) == 0

        assert json.loads(capsys.readouterr().out)["name"] == "Red Hoodie"
        assert isinstance(gateway, GeminiGateway)
