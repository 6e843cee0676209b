"""
Session I/O utilities for the point-location pipeline.

This module provides:
    • load_session(path)
    • load_sessions(path_pattern)
    • save_session(path, session)
    • save_result(path, payload)

Session files are JSON documents of the form

    {
        "points":  [{"x": 10, "y": 20}, ...],
        "edges":   [{"from": {"x": .., "y": ..}, "to": {"x": .., "y": ..}}, ...],
        "screen":  {"width": 1280, "height": 720},
        "queries": [{"x": .., "y": ..}]          (optional)
    }
"""

import glob
import json
import os
from typing import List, Tuple

from models.point import Point, Segment
from models.session import Session
from utils.image_io import ensure_output_dir


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def session_name(filename: str) -> str:
    """
    Identifier used to name output files.

    Example:
        'sessions/triangle.json' → 'triangle'
    """
    return os.path.splitext(os.path.basename(filename))[0]


# -------------------------------------------------------------------------
#  LOADING
# -------------------------------------------------------------------------

def session_from_dict(data: dict) -> Session:
    points = [Point.from_dict(p) for p in data.get("points", [])]
    segments = [Segment.from_dict(e) for e in data.get("edges", [])]
    queries = [Point.from_dict(q) for q in data.get("queries", [])]

    screen = data.get("screen") or {}
    return Session(
        points=points,
        segments=segments,
        width=screen.get("width"),
        height=screen.get("height"),
        queries=queries,
    )


def load_session(path: str) -> Session:
    with open(path, "r", encoding="utf-8") as fh:
        return session_from_dict(json.load(fh))


def load_sessions(path_pattern: str) -> Tuple[List[Session], List[str]]:
    """
    Loads all session files matching the given glob pattern.

    Returns:
        sessions: list of Session
        names:    list of identifiers derived from the filenames

    Files that are not valid JSON are skipped.
    """
    file_list = sorted(glob.glob(path_pattern))
    sessions = []
    names = []

    for fname in file_list:
        try:
            session = load_session(fname)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError):
            continue
        sessions.append(session)
        names.append(session_name(fname))

    return sessions, names


# -------------------------------------------------------------------------
#  SAVING
# -------------------------------------------------------------------------

def session_to_dict(session: Session) -> dict:
    data = {
        "points": [p.to_dict() for p in session.points],
        "edges": [s.to_dict() for s in session.segments],
    }
    if session.width is not None and session.height is not None:
        data["screen"] = {"width": session.width, "height": session.height}
    if session.queries:
        data["queries"] = [q.to_dict() for q in session.queries]
    return data


def save_session(path: str, session: Session):
    save_result(path, session_to_dict(session))


def save_result(path: str, payload: dict):
    """
    Write a JSON document to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)
