from pathlib import Path

from beancount_shorthand.presentation.cli.main import main


def test_full_cli_flow(tmp_path: Path, accounts_toml: str, capsys):
    config = tmp_path / "accounts.toml"
    config.write_text(accounts_toml, encoding="utf-8")

    assert main(["check-config", "-c", str(config)]) == 0
    assert main(["accounts", "-c", str(config), "--json"]) == 0
    capsys.readouterr()

    lines = [
        "2021-09-08 @KFC hamburger 12.40 AUD cba > food",
        "2021-09-08 @Woolworths weekly groceries 55.10 AUD amex > food",
    ]
    ledger = ""
    for line in lines:
        assert main(["format", "-c", str(config), line]) == 0
        ledger += capsys.readouterr().out + "\n"

    assert ledger.count(" * ") == 2
    assert "  Liabilities:CreditCard:AMEX\n" in ledger
    # bad lines do not produce output
    assert main(["format", "-c", str(config), "2021-09-08 @KFC hamburger 12.40 cba > food"]) == 2
    assert capsys.readouterr().out == ""
