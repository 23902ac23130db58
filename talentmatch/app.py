import argparse
import json
from pathlib import Path

from . import __version__
from . import storage
from .config import Settings, load_settings
from .database import get_session, init_database
from .env import load_env
from .errors import AnchorNotFound, InvalidQuery
from .filters import JobFilter, WorkerFilter
from .logger import get_logger
from .schema import validate_job, validate_worker
from .service import MatchService


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _load_record(path_str: str) -> dict:
    input_path = Path(path_str)
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")
    with input_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _open_session(args: argparse.Namespace):
    db_path = Path(args.db)
    if not db_path.exists():
        raise SystemExit(f"Database not found: {db_path}. Run 'talentmatch init-db' first.")
    return get_session(db_path)


def _service(args: argparse.Namespace, session) -> MatchService:
    settings: Settings = args.settings
    logger = get_logger(level=settings.log_level, log_dir=settings.log_dir)
    return MatchService(session, settings=settings, logger=logger)


def cmd_init_db(args: argparse.Namespace) -> None:
    db_path = Path(args.db)
    init_database(db_path)
    print(f"Initialized database at {db_path}")


def cmd_add_worker(args: argparse.Namespace) -> None:
    record = _load_record(args.input)
    errors = validate_worker(record)
    if errors:
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    session = _open_session(args)
    try:
        _print_json(storage.add_worker(session, record).to_dict())
    finally:
        session.close()


def cmd_add_job(args: argparse.Namespace) -> None:
    record = _load_record(args.input)
    errors = validate_job(record)
    if errors:
        print("Invalid:")
        for e in errors:
            print(f" - {e}")
        raise SystemExit(2)
    session = _open_session(args)
    try:
        _print_json(storage.add_job(session, record).to_dict())
    finally:
        session.close()


def cmd_match_job(args: argparse.Namespace) -> None:
    session = _open_session(args)
    try:
        report = _service(args, session).find_workers_for_job(args.job_id, args.min_score, args.limit)
    except AnchorNotFound as e:
        raise SystemExit(str(e))
    except InvalidQuery as e:
        print(f"Invalid query: {e}")
        raise SystemExit(2)
    finally:
        session.close()
    _print_json(report.to_dict())


def cmd_match_worker(args: argparse.Namespace) -> None:
    session = _open_session(args)
    try:
        report = _service(args, session).find_jobs_for_worker(args.worker_id, args.min_score, args.limit)
    except AnchorNotFound as e:
        raise SystemExit(str(e))
    except InvalidQuery as e:
        print(f"Invalid query: {e}")
        raise SystemExit(2)
    finally:
        session.close()
    _print_json(report.to_dict())


def cmd_stats(args: argparse.Namespace) -> None:
    session = _open_session(args)
    try:
        stats = _service(args, session).corpus_stats()
    finally:
        session.close()
    _print_json(stats.to_dict())


def cmd_list_jobs(args: argparse.Namespace) -> None:
    job_filter = JobFilter(
        client_id=args.client_id,
        is_active=False if args.inactive else (True if args.active else None),
        location=args.location,
        job_type=args.job_type,
        search=args.search,
        salary_min=args.salary_min,
        salary_max=args.salary_max,
        limit=args.limit,
    )
    session = _open_session(args)
    try:
        jobs = storage.list_jobs(session, job_filter)
    finally:
        session.close()
    _print_json([j.to_dict() for j in jobs])


def cmd_list_workers(args: argparse.Namespace) -> None:
    worker_filter = WorkerFilter(
        search=args.search,
        skill=args.skill,
        min_experience=args.min_experience,
        max_experience=args.max_experience,
        limit=args.limit,
    )
    session = _open_session(args)
    try:
        workers = storage.list_workers(session, worker_filter)
    finally:
        session.close()
    _print_json([w.to_dict() for w in workers])


def cmd_skills(args: argparse.Namespace) -> None:
    session = _open_session(args)
    try:
        skills = storage.list_distinct_skills(session)
    finally:
        session.close()
    _print_json(skills)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="talentmatch", description="Job/worker compatibility matching")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.set_defaults(settings=settings)

    db_help = f"Path to SQLite database (default: {settings.db_path})"
    subparsers = parser.add_subparsers(dest="command")

    init = subparsers.add_parser("init-db", help="Create the database tables")
    init.add_argument("--db", default=str(settings.db_path), help=db_help)
    init.set_defaults(func=cmd_init_db)

    aw = subparsers.add_parser("add-worker", help="Insert a worker from a JSON record")
    aw.add_argument("--input", required=True, help="Path to worker JSON")
    aw.add_argument("--db", default=str(settings.db_path), help=db_help)
    aw.set_defaults(func=cmd_add_worker)

    aj = subparsers.add_parser("add-job", help="Insert a job posting from a JSON record")
    aj.add_argument("--input", required=True, help="Path to job posting JSON")
    aj.add_argument("--db", default=str(settings.db_path), help=db_help)
    aj.set_defaults(func=cmd_add_job)

    mj = subparsers.add_parser("match-job", help="Rank workers for an active job")
    mj.add_argument("--job-id", required=True, help="Job posting id")
    mj.add_argument("--min-score", type=float, help="Minimum compatibility score (default 0)")
    mj.add_argument("--limit", type=int, help=f"Max results (default {settings.default_limit}, max {settings.max_limit})")
    mj.add_argument("--db", default=str(settings.db_path), help=db_help)
    mj.set_defaults(func=cmd_match_job)

    mw = subparsers.add_parser("match-worker", help="Rank active jobs for a worker")
    mw.add_argument("--worker-id", required=True, help="Worker id")
    mw.add_argument("--min-score", type=float, help="Minimum compatibility score (default 0)")
    mw.add_argument("--limit", type=int, help=f"Max results (default {settings.default_limit}, max {settings.max_limit})")
    mw.add_argument("--db", default=str(settings.db_path), help=db_help)
    mw.set_defaults(func=cmd_match_worker)

    st = subparsers.add_parser("stats", help="Corpus statistics over active jobs and workers")
    st.add_argument("--db", default=str(settings.db_path), help=db_help)
    st.set_defaults(func=cmd_stats)

    lj = subparsers.add_parser("list-jobs", help="List job postings")
    lj.add_argument("--client-id", help="Only postings of this client")
    state = lj.add_mutually_exclusive_group()
    state.add_argument("--active", action="store_true", help="Only active postings")
    state.add_argument("--inactive", action="store_true", help="Only inactive postings")
    lj.add_argument("--location", help="Location substring (case-insensitive)")
    lj.add_argument("--job-type", help="full-time, part-time, contract or remote")
    lj.add_argument("--search", help="Substring of title or description")
    lj.add_argument("--salary-min", type=int, help="Lower salary bound at least this")
    lj.add_argument("--salary-max", type=int, help="Upper salary bound at most this")
    lj.add_argument("--limit", type=int, help="Max postings to list")
    lj.add_argument("--db", default=str(settings.db_path), help=db_help)
    lj.set_defaults(func=cmd_list_jobs)

    lw = subparsers.add_parser("list-workers", help="List workers")
    lw.add_argument("--search", help="Substring of name or email")
    lw.add_argument("--skill", help="Exact skill tag")
    lw.add_argument("--min-experience", type=int, help="Minimum years of experience")
    lw.add_argument("--max-experience", type=int, help="Maximum years of experience")
    lw.add_argument("--limit", type=int, help="Max workers to list")
    lw.add_argument("--db", default=str(settings.db_path), help=db_help)
    lw.set_defaults(func=cmd_list_workers)

    sk = subparsers.add_parser("skills", help="List distinct worker skills")
    sk.add_argument("--db", default=str(settings.db_path), help=db_help)
    sk.set_defaults(func=cmd_skills)

    return parser


def main(argv=None):
    # Load .env if present (TALENTMATCH_DB_PATH, TALENTMATCH_REQUIRED_YEARS, etc.)
    load_env()
    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}")
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
