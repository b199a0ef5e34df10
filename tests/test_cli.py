from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from core.config import AppSettings
from core.domain.errors import AuthStatusError, FetchTransportError
from core.domain.models import Breeds, Listing, ListingCollection

runner = CliRunner()

REX = Listing(
    id=1,
    name="Rex",
    age="Young",
    gender="Male",
    size="Large",
    breeds=Breeds(primary="Boxer", secondary="Beagle"),
    url="https://www.petfinder.com/dog/rex-1/",
)


@pytest.fixture
def fetched(monkeypatch) -> list[str]:
    """Patch auth + fetch; returns the list of URLs fetched."""

    urls: list[str] = []

    def fake_fetch(url: str, token: str, **kwargs) -> ListingCollection:
        assert token == "tok123"
        urls.append(url)
        return ListingCollection(animals=[REX])

    monkeypatch.setattr(
        cli_main,
        "AppSettings",
        lambda: AppSettings(client_id="id", client_secret="secret", _env_file=None),
    )
    monkeypatch.setattr(cli_main, "configure_logging", lambda level: None)
    monkeypatch.setattr(cli_main, "authenticate", lambda client_id, client_secret, **kwargs: "tok123")
    monkeypatch.setattr(cli_main, "fetch_listings", fake_fetch)
    return urls


def test_search_without_mode_prints_usage(fetched):
    result = runner.invoke(cli_main.app, ["search"])

    assert result.exit_code == 1
    assert "Usage:" in result.output
    assert "--3days" in result.output
    assert fetched == []


def test_search_today_prints_listings(fetched):
    result = runner.invoke(cli_main.app, ["search", "--today"])

    assert result.exit_code == 0, result.output
    assert "Looking for new dogs posted today..." in result.output
    assert "Name: Rex" in result.output
    assert "Breed: Boxer / Beagle" in result.output
    assert "URL: https://www.petfinder.com/dog/rex-1/" in result.output
    assert len(fetched) == 1
    assert "&after=" in fetched[0]


def test_modes_run_in_fixed_order(fetched):
    result = runner.invoke(cli_main.app, ["search", "--age", "baby", "--3days", "--today"])

    assert result.exit_code == 0, result.output
    assert len(fetched) == 3
    assert fetched[2].endswith("&age=baby")


def test_filter_prompts_for_each_category(fetched):
    result = runner.invoke(cli_main.app, ["search", "--filter"], input="baby, Young, kitten\n\nfemale\n")

    assert result.exit_code == 0, result.output
    assert "Filter Options" in result.output
    assert "Rescue Dogs" in result.output
    assert fetched == [
        "https://api.petfinder.com/v2/animals?type=dog&organization=OR208&status=adoptable"
        "&age=baby%2Cyoung&gender=female"
    ]


def test_filter_option_skips_its_prompt(fetched):
    result = runner.invoke(cli_main.app, ["search", "--filter", "--size", "small"], input="\n\n")

    assert result.exit_code == 0, result.output
    assert "Enter Size options" not in result.output
    assert fetched[0].endswith("&size=small")


def test_empty_result_prints_no_results_message(fetched, monkeypatch):
    monkeypatch.setattr(cli_main, "fetch_listings", lambda url, token, **kwargs: ListingCollection(animals=[]))

    result = runner.invoke(cli_main.app, ["search", "--3days"])

    assert result.exit_code == 0, result.output
    assert "No new dogs posted recently :(" in result.output
    assert "Name:" not in result.output


def test_fetch_failure_skips_only_that_mode(fetched, monkeypatch):
    def flaky(url: str, token: str, **kwargs) -> ListingCollection:
        if "after=" in url:
            raise FetchTransportError("listing request failed: connection reset")
        return ListingCollection(animals=[REX])

    monkeypatch.setattr(cli_main, "fetch_listings", flaky)

    result = runner.invoke(cli_main.app, ["search", "--today", "--gender", "male"])

    assert result.exit_code == 0, result.output
    assert "Failed to fetch animals: listing request failed: connection reset" in result.output
    assert "Name: Rex" in result.output


def test_authentication_failure_exits(fetched, monkeypatch):
    def reject(client_id, client_secret, **kwargs):
        raise AuthStatusError("authentication failed with status code: 401", status_code=401)

    monkeypatch.setattr(cli_main, "authenticate", reject)

    result = runner.invoke(cli_main.app, ["search", "--today"])

    assert result.exit_code == 1
    assert "Authentication failed" in result.output
    assert fetched == []


def test_missing_credentials_exit(fetched, monkeypatch):
    monkeypatch.setattr(cli_main, "AppSettings", lambda: AppSettings(_env_file=None))

    result = runner.invoke(cli_main.app, ["search", "--today"])

    assert result.exit_code == 1
    assert "RESCUE_DOGS_CLIENT_ID" in result.output


def test_json_output(fetched):
    result = runner.invoke(cli_main.app, ["search", "--today", "--json"])

    assert result.exit_code == 0, result.output
    payload = _json_payload(result.stdout)
    assert payload["today"]["animals"][0]["name"] == "Rex"
    assert payload["today"]["animals"][0]["breeds"]["secondary"] == "Beagle"


def _json_payload(stdout: str) -> dict:
    # Status lines go to stderr; older Click runners mix them into stdout first.
    return json.loads(stdout[stdout.index("{"):])


def test_json_output_with_several_modes_is_one_document(fetched):
    result = runner.invoke(cli_main.app, ["search", "--today", "--3days", "--age", "adult", "--json"])

    assert result.exit_code == 0, result.output
    payload = _json_payload(result.stdout)
    assert sorted(payload) == ["3days", "filter", "today"]
    assert all(payload[name]["animals"][0]["name"] == "Rex" for name in payload)


def test_json_output_leaves_out_failed_modes(fetched, monkeypatch):
    def flaky(url: str, token: str, **kwargs) -> ListingCollection:
        if "after=" in url:
            raise FetchTransportError("listing request failed: connection reset")
        return ListingCollection(animals=[])

    monkeypatch.setattr(cli_main, "fetch_listings", flaky)

    result = runner.invoke(cli_main.app, ["search", "--today", "--gender", "male", "--json"])

    assert result.exit_code == 0, result.output
    assert _json_payload(result.stdout) == {"filter": {"animals": []}}


def test_long_status_lines_are_not_wrapped(fetched):
    result = runner.invoke(
        cli_main.app,
        [
            "search",
            "--age", "baby,young,adult,senior",
            "--size", "small,medium,large,xlarge",
            "--gender", "male,female",
        ],
    )

    assert result.exit_code == 0, result.output
    assert (
        "Looking for new dogs with the selected filter options: "
        "baby,young,adult,senior small,medium,large,xlarge male,female"
    ) in result.output.splitlines()
