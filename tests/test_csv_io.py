from __future__ import annotations
import pytest
from volley_core.csv_io import build_template_csv, parse_roster_csv, roster_to_dataframe
from volley_core.roster import default_players

def test_parse_roster_with_aliases():
    data = (
        "Player,Position,#\n"
        "Ana Ruiz,setter,1\n"
        ",OH,3\n"
        "Bo  Lee,MB,\n"
        "Cy,Libero,12\n"
    ).encode("utf-8")
    players = parse_roster_csv(data)
    assert [p.id for p in players] == ["p1", "p2", "p3"]
    assert [p.name for p in players] == ["Ana Ruiz", "Bo Lee", "Cy"]
    assert [p.role for p in players] == ["S", "MB", "L"]
    assert [p.jersey for p in players] == [1, None, 12]

def test_parse_roster_missing_role_column():
    with pytest.raises(ValueError):
        parse_roster_csv(b"name,jersey\nAna,1\n")

def test_template_parses():
    players = parse_roster_csv(build_template_csv())
    assert players[0].id == "p1"
    assert players[0].role == "S"

def test_roster_to_dataframe_columns():
    df = roster_to_dataframe(default_players())
    assert list(df.columns) == ["id", "name", "role", "jersey"]
    assert len(df) == 9
    assert df.iloc[6]["name"] == "Setter2"

def test_generated_ids_skip_explicit_ones():
    players = parse_roster_csv(b"id,name,role\np2,Ana,S\n,Bo,OH\n,Cy,MB\np1,Di,L\n")
    assert [p.id for p in players] == ["p2", "p3", "p4", "p1"]

def test_duplicate_explicit_ids_rejected():
    with pytest.raises(ValueError):
        parse_roster_csv(b"id,name,role\np2,Ana,S\np2,Bo,OH\n")

@pytest.mark.parametrize("jersey", ["inf", "1.5", "nan", "seven"])
def test_jersey_must_be_whole_number(jersey):
    with pytest.raises(ValueError):
        parse_roster_csv(f"name,role,jersey\nAna,S,{jersey}\n".encode("utf-8"))

def test_jersey_written_as_float_is_accepted():
    assert parse_roster_csv(b"name,role,jersey\nAna,S,7.0\n")[0].jersey == 7
