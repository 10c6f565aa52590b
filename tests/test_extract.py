from refstats.core.extract import extract_references


def test_no_marker_yields_nothing():
    assert extract_references("csc.exe /noconfig /out:app.dll Program.cs") == []
    assert extract_references("") == []


def test_references_in_order_and_last_truncated_at_next_flag():
    line = "foo /reference:A.dll /reference:B.dll /out:x"
    assert extract_references(line) == ["A.dll", "B.dll"]


def test_duplicates_are_kept():
    line = "csc /reference:A.dll /reference:A.dll"
    assert extract_references(line) == ["A.dll", "A.dll"]


def test_quotes_are_left_in_place():
    line = 'csc /reference:"C:\\lib\\My Lib.dll" /debug+'
    assert extract_references(line) == ['"C:\\lib\\My Lib.dll"']


def test_single_reference_without_trailing_flags():
    assert extract_references("csc /reference:C:\\refs\\System.dll  ") == ["C:\\refs\\System.dll"]
