import pytest

from main import main


def test_main_writes_every_kth_frame(tmp_path):
    rc = main(
        ["car", "--frames", "5", "--every", "2", "--out", str(tmp_path), "--size", "32", "32"]
    )
    assert rc == 0
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["car_0000.png", "car_0002.png", "car_0004.png"]


def test_main_dump_prints_summary(tmp_path, capsys):
    main(
        ["flower", "--frames", "1", "--out", str(tmp_path), "--size", "16", "16", "--dump"]
    )
    out = capsys.readouterr().out
    assert "FLOWER" in out
    assert "Draw count      : 18" in out


def test_main_rejects_unknown_scene(tmp_path):
    with pytest.raises(SystemExit):
        main(["boat", "--out", str(tmp_path)])


def test_main_rejects_bad_size(tmp_path):
    with pytest.raises(SystemExit):
        main(["car", "--out", str(tmp_path), "--size", "0", "10"])
