from __future__ import annotations
import io
import logging
from typing import Dict, Iterable, List, Optional, Set
import pandas as pd
from .constants import CSV_HEADERS, HEADER_ALIASES, normalize_name, normalize_role
from .models import Player

logger = logging.getLogger(__name__)

def _header_map(cols: Iterable[str]) -> Dict[str, str]:
    """
    Build a mapping from provided column -> canonical header.
    Case-insensitive, uses HEADER_ALIASES, leaves unknown columns untouched.
    """
    out = {}
    for c in cols:
        lc = str(c).strip().lower()
        mapped = None
        for k, aliases in HEADER_ALIASES.items():
            if lc == k or lc in aliases:
                mapped = k
                break
        out[c] = mapped if mapped else c
    return out

def _jersey(v) -> Optional[int]:
    if v is None or (isinstance(v, float) and pd.isna(v)):
        return None
    s = str(v).strip()
    if not s:
        return None
    try:
        f = float(s)
    except ValueError:
        raise ValueError(f"Jersey must be a whole number, got {v!r}")
    if not f.is_integer():  # also rejects inf and nan
        raise ValueError(f"Jersey must be a whole number, got {v!r}")
    return int(f)

def parse_roster_csv(file) -> List[Player]:
    """
    Parse a roster CSV (bytes or file-like).
    Applies header aliasing and returns a list[Player] in file order.
    """
    if isinstance(file, (bytes, bytearray)):
        df = pd.read_csv(io.BytesIO(file), dtype=str, keep_default_na=False)
    else:
        df = pd.read_csv(file, dtype=str, keep_default_na=False)

    df = df.rename(columns=_header_map(df.columns))
    for k in ("name", "role"):
        if k not in df.columns:
            raise ValueError(f"Missing required column: {k}")
    for k in CSV_HEADERS:
        if k not in df.columns:
            df[k] = ""
    df = df[CSV_HEADERS].copy()

    rows = [r for _, r in df.iterrows() if normalize_name(str(r.get("name", "")))]
    explicit = [str(r.get("id", "")).strip() for r in rows]
    explicit = [pid for pid in explicit if pid]
    dupes = sorted({pid for pid in explicit if explicit.count(pid) > 1})
    if dupes:
        raise ValueError(f"Duplicate player ids: {dupes}")
    taken: Set[str] = set(explicit)
    next_n = 1

    players: List[Player] = []
    for r in rows:
        name = normalize_name(str(r.get("name", "")))
        pid = str(r.get("id", "")).strip()
        if not pid:
            while f"p{next_n}" in taken:
                next_n += 1
            pid = f"p{next_n}"
            taken.add(pid)
        players.append(Player(
            id=pid,
            name=name,
            role=normalize_role(str(r.get("role", ""))),
            jersey=_jersey(r.get("jersey")),
        ))
    logger.info("Parsed %d players from roster CSV", len(players))
    return players

def build_template_csv() -> bytes:
    example = (
        "id,name,role,jersey\n"
        "p1,Setter1,S,1\n"
    )
    return example.encode("utf-8")

def roster_to_dataframe(players: List[Player]) -> pd.DataFrame:
    rows = []
    for p in players:
        rows.append({"id": p.id, "name": p.name, "role": p.role, "jersey": p.jersey})
    return pd.DataFrame(rows, columns=CSV_HEADERS)
