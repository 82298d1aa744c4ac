import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from resume_analyzer.analysis.analyzer import ResumeAnalyzer
from resume_analyzer.analysis.models import ExperienceLevel
from resume_analyzer.config.settings import Settings
from resume_analyzer.inference.exceptions import InferenceError
from resume_analyzer.inference.factory import InferenceClientFactory
from resume_analyzer.ingestion.exceptions import BatchValidationError
from resume_analyzer.ingestion.file_loader import FileLoader
from resume_analyzer.ingestion.models import (
    BatchProgress,
    ExtractionFailure,
    ExtractionSuccess,
    aggregate_documents,
)
from resume_analyzer.ingestion.pipeline import build_pipeline
from resume_analyzer.logging.logger import Log


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="resume-analyzer",
        description="Extract text from resume documents and analyze it against a job description.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="resume documents (PDF, DOCX, TXT, PNG, JPG)")
    parser.add_argument("--job-description", type=Path, help="text file with the job description")
    parser.add_argument(
        "--level",
        choices=[level.value for level in ExperienceLevel],
        default=ExperienceLevel.FRESHER.value,
    )
    parser.add_argument(
        "--extract-only",
        action="store_true",
        help="print the aggregated text and skip the AI analysis",
    )
    args = parser.parse_args(argv)
    if not args.extract_only and args.job_description is None:
        parser.error("--job-description is required unless --extract-only is given")
    return args


def _log_progress(progress: BatchProgress) -> None:
    Log.info(
        f"File {progress.current_file_index} of {progress.total_files} "
        f"({progress.file_name}): {progress.percent_complete}%"
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point: load files -> extract -> aggregate -> analyze."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    pipeline = build_pipeline(settings)
    try:
        files = FileLoader().load_many(args.files)
        results = pipeline.process_batch(files, _log_progress)
    except (FileNotFoundError, BatchValidationError) as exc:
        Log.error(str(exc))
        return 1

    for result in results:
        if isinstance(result, ExtractionFailure):
            Log.error(f"{result.file_name}: {result.error}")
    if not any(isinstance(r, ExtractionSuccess) for r in results):
        Log.error("No text could be extracted from the selected files")
        return 1

    resume = aggregate_documents(results)
    if args.extract_only:
        print(resume)
        return 0

    try:
        job_description = args.job_description.read_text(encoding="utf-8")
        analyzer = ResumeAnalyzer(InferenceClientFactory.create(settings))
        report = analyzer.analyze(resume, job_description, args.level)
    except (OSError, ValueError, InferenceError) as exc:
        Log.error(f"Analysis failed: {exc}")
        return 1

    print(json.dumps(asdict(report), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
