from models.errors import GraphError, SubdivisionError
from models.session import Session
from subdivision.locate import locate
from utils.session_io import load_sessions
from utils.image_io import ensure_output_dir
from utils.transform import flip_point, flip_points, flip_segments
from visualization.save_outputs import save_all_outputs

from config import (
    SESSION_PATTERN,
    OUTPUT_FOLDER,
    get_active_params,
)


def process_session(session: Session, session_name: str, output_dir: str = OUTPUT_FOLDER):
    """
    Runs the complete pipeline for one session:
      1. Precondition check (at least two distinct points)
      2. Move to y-up coordinates if the session was recorded on screen
      3. For every query point:
           a. regularize, balance and extract chains
           b. locate the enclosing chains
           c. save all outputs (graph, chains, located, result json)

    Returns the list of LocateResult objects, one per query that succeeded.
    """

    print(f"\n=== Processing session with name: {session_name} ===")
    params = get_active_params()

    # ------------------------------
    # STEP 0: PRECONDITIONS
    # ------------------------------
    if len(set(session.points)) < 2:
        print(f"[WARN] {session_name} has fewer than 2 distinct points. Skipping.")
        return []

    queries = session.resolved_queries()

    # ------------------------------
    # STEP 1: COORDINATE SPACE
    # ------------------------------
    flip_y = params["FLIP_Y"]
    if flip_y:
        points = flip_points(session.points)
        segments = flip_segments(session.segments)
        queries = flip_points(queries)
    else:
        points = list(session.points)
        segments = list(session.segments)

    width = session.width or params["CANVAS_WIDTH"]
    height = session.height or params["CANVAS_HEIGHT"]

    results = []
    for idx, query in enumerate(queries):
        shown = flip_point(query) if flip_y else query

        # ------------------------------
        # STEP 2: LOCATE
        # ------------------------------
        try:
            result = locate(query, points, segments)
        except (SubdivisionError, GraphError) as exc:
            print(f"[ERROR] {session_name}: query {shown!r} failed: {exc}")
            continue

        print(
            f"[INFO] {session_name}: {len(result.chains)} chains, "
            f"query {shown!r} -> {result.location}"
        )

        # ------------------------------
        # STEP 3: SAVE OUTPUTS
        # ------------------------------
        output_id = session_name if len(queries) == 1 else f"{session_name}_{idx}"
        save_all_outputs(
            output_dir=output_dir,
            output_id=output_id,
            points=points,
            query=query,
            result=result,
            width=width,
            height=height,
            flip_y=flip_y,
        )
        results.append(result)

    print(f"[OK] Finished {session_name}")
    return results


def main():
    """
    Main entry point:
      - Loads sessions
      - Processes each one independently
      - Saves output files
    """
    ensure_output_dir(OUTPUT_FOLDER)

    sessions, names = load_sessions(SESSION_PATTERN)
    if not sessions:
        print(f"[ERROR] No sessions matched pattern: {SESSION_PATTERN}")
        return

    for session, name in zip(sessions, names):
        process_session(session, name)

    print("\n=== All sessions processed ===")


if __name__ == "__main__":
    main()
