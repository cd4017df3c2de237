"""Tests for the command line interface."""

import json

import pytest

from foodlog.cli import main

MILK = "**Пищевая ценность**\n5/3/4.7/60\n"
SOUP = "**Пищевая ценность**\n5/4/10/80\n100\n\n**Цена**\n- [[2024-03-01]] 150\n"
LOG = "- [[Молоко]] - 250г\n- [[Суп]] - 2\n- [[Пицца]]\n\n**Итого:**\n"


@pytest.fixture
def products_dir(tmp_path):
    root = tmp_path / "products"
    root.mkdir()
    (root / "Молоко.md").write_text(MILK, encoding="utf-8")
    (root / "Суп.md").write_text(SOUP, encoding="utf-8")
    (root / "_readme.md").write_text("**Цена**\n", encoding="utf-8")
    return root


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "2024-03-01.md"
    path.write_text(LOG, encoding="utf-8")
    return path


def test_no_command_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1


def test_products(products_dir, capsys):
    main(["products", str(products_dir)])
    out = capsys.readouterr().out
    assert "Найдено продуктов: 2" in out
    assert "Молоко  5/3/4.7/60" in out
    assert "Суп  5/4/10/80  порция 100  цена 150 (2024-03-01)" in out


def test_products_json(products_dir, capsys):
    main(["products", str(products_dir), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert [p["name"] for p in data] == ["Молоко", "Суп"]
    assert data[1]["blocks"]["nutrition"]["portion_size"] == 100
    assert data[0]["blocks"]["price"] is None


def test_products_missing_dir(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["products", str(tmp_path / "nope")])
    assert exc.value.code == 1
    assert "nope" in capsys.readouterr().err


def test_show(products_dir, capsys):
    main(["show", "Суп", "--products", str(products_dir)])
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "# Суп"
    assert "- [[2024-03-01]] 150" in out


def test_show_unknown(products_dir, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["show", "Пицца", "--products", str(products_dir)])
    assert exc.value.code == 1


def test_day(products_dir, log_file, capsys):
    main(["day", str(log_file), "--products", str(products_dir)])
    out = capsys.readouterr().out
    assert "Молоко  13/8/12/150" in out
    assert "Суп     10/8/20/160" in out
    assert "Итого за день: 23/16/32/310" in out
    assert "Пицца" not in out


def test_day_json(products_dir, log_file, capsys):
    main(["day", str(log_file), "--products", str(products_dir), "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["total"] == {
        "fats": 23, "proteins": 16, "carbohydrates": 32, "calories": 310,
    }
    assert list(data["products"]) == ["Молоко", "Суп"]


def test_day_write(products_dir, log_file, capsys):
    main(["day", str(log_file), "--products", str(products_dir), "--write"])
    text = log_file.read_text(encoding="utf-8")
    assert text.endswith("**Итого:**\nЖ/Б/У/Ккал: 23/16/32/310\n")


def test_day_write_without_marker(products_dir, tmp_path, capsys):
    log = tmp_path / "day.md"
    log.write_text("- [[Суп]]\n", encoding="utf-8")

    main(["day", str(log), "--products", str(products_dir), "--write"])

    assert log.read_text(encoding="utf-8") == "- [[Суп]]\n"
    assert "**Итого:**" in capsys.readouterr().err


def test_day_missing_log(products_dir, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["day", str(tmp_path / "missing.md"), "--products", str(products_dir)])
    assert exc.value.code == 1
    assert "missing.md" in capsys.readouterr().err


def test_day_log_from_config(products_dir, log_file, tmp_path, capsys):
    config = tmp_path / "foodlog.toml"
    config.write_text(
        f'[products]\ndir = "{products_dir.as_posix()}"\n'
        f'[diary]\npath = "{log_file.as_posix()}"\n',
        encoding="utf-8",
    )
    main(["-c", str(config), "day"])
    assert "Итого за день: 23/16/32/310" in capsys.readouterr().out


def test_day_without_log_path(products_dir, monkeypatch, capsys):
    monkeypatch.delenv("FOODLOG_DIARY", raising=False)
    with pytest.raises(SystemExit) as exc:
        main(["day", "--products", str(products_dir)])
    assert exc.value.code == 1


def _reject_constant(name):
    raise ValueError(f"non-standard JSON constant: {name}")


def test_day_json_nan_is_null(products_dir, tmp_path, capsys):
    log = tmp_path / "day.md"
    log.write_text("- [[Суп]] - 1/2\n", encoding="utf-8")

    main(["day", str(log), "--products", str(products_dir), "--json"])

    data = json.loads(capsys.readouterr().out, parse_constant=_reject_constant)
    assert data["total"] == {
        "fats": None, "proteins": None, "carbohydrates": None, "calories": None,
    }


def test_products_json_nan_is_null(products_dir, capsys):
    (products_dir / "Торт.md").write_text(
        "**Пищевая ценность**\n5/много/30/203\n", encoding="utf-8"
    )

    main(["products", str(products_dir), "--json"])

    data = json.loads(capsys.readouterr().out, parse_constant=_reject_constant)
    cake = next(p for p in data if p["name"] == "Торт")
    assert cake["blocks"]["nutrition"]["values"]["proteins"] is None
    assert cake["blocks"]["nutrition"]["values"]["fats"] == 5


def test_day_write_keeps_crlf(products_dir, tmp_path, capsys):
    log = tmp_path / "day.md"
    log.write_bytes(LOG.replace("\n", "\r\n").encode("utf-8"))

    main(["day", str(log), "--products", str(products_dir), "--write"])

    data = log.read_bytes().decode("utf-8")
    assert data.endswith("**Итого:**\r\nЖ/Б/У/Ккал: 23/16/32/310\r\n")
    assert "\n" not in data.replace("\r\n", "")


def test_unknown_log_level_in_config(products_dir, log_file, tmp_path, capsys):
    config = tmp_path / "foodlog.toml"
    config.write_text('[logging]\nlevel = "verbose"\n', encoding="utf-8")

    main(["-c", str(config), "day", str(log_file), "--products", str(products_dir)])

    assert "Итого за день: 23/16/32/310" in capsys.readouterr().out
