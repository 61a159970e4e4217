"""Batch orchestrator: locate -> read -> match -> render -> write, one job at a time."""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Iterable

from enum_sync import status
from enum_sync.config import BatchConfig
from enum_sync.errors import SourceNotFoundError
from enum_sync.exporter import (
    create_comment_content,
    create_description_content,
    create_file_content,
    create_index_content,
    find_file_path,
    read_file,
    write_file,
)
from enum_sync.formatter import get_enums, get_enums_with_description
from enum_sync.models import BatchResult, EnumBodies, Matcher, ParseJob

logger = logging.getLogger(__name__)

EnumsFunc = Callable[[str, Matcher], EnumBodies]


def read_source(job: ParseJob) -> str:
    """Locate and read the source file of a job."""
    path = find_file_path(job.src_file_name, job.src_directory)
    if path is None:
        raise SourceNotFoundError(job.src_file_name, job.src_directory)
    logger.debug("Reading %s for %s", path, job.enum_name)
    return read_file(path)


def render_job(job: ParseJob, bodies: EnumBodies) -> str:
    """Full generated file text for a job."""
    description = ""
    if job.has_description:
        description = create_description_content(job.description_enum_name, bodies.descriptions)
    return create_file_content(
        job.enum_name,
        bodies.values,
        create_comment_content(job.comment),
        description,
    )


def _run_jobs(
    jobs: Iterable[ParseJob],
    dest_dir: str | Path,
    enums_for: Callable[[ParseJob], EnumsFunc],
    extension: str,
    result: BatchResult | None,
) -> BatchResult:
    if result is None:
        result = BatchResult(output_dir=Path(dest_dir))

    for job in jobs:
        if job.skip:
            logger.info("Skipping %s", job.enum_name)
            status.ignore_generation(job.enum_name)
            result.ignored.append(job.enum_name)
            continue

        content = read_source(job)
        bodies = enums_for(job)(content, job.matcher)
        logger.debug("%s: %d member(s)", job.enum_name, bodies.member_count)

        path = write_file(job.enum_name, dest_dir, render_job(job, bodies), extension)
        result.files_created.append(path)
        result.generated.append(job.enum_name)
        status.success_generation(job.enum_name)

    return result


def parse_enums(
    jobs: Iterable[ParseJob],
    dest_dir: str | Path,
    get_enums_func: EnumsFunc | None = None,
    extension: str = "ts",
    allow_duplicates: bool = False,
    result: BatchResult | None = None,
) -> BatchResult:
    """Generate a value enum file per job.

    The first failing job aborts the batch; later jobs are not run.
    """
    default = partial(get_enums, allow_duplicates=allow_duplicates)
    return _run_jobs(
        jobs, dest_dir, lambda job: get_enums_func or default, extension, result,
    )


def parse_enums_with_description(
    jobs: Iterable[ParseJob],
    dest_dir: str | Path,
    get_enums_func: EnumsFunc | None = None,
    extension: str = "ts",
    allow_duplicates: bool = False,
    result: BatchResult | None = None,
) -> BatchResult:
    """Generate a value enum plus a description enum file per job."""
    def enums_for(job: ParseJob) -> EnumsFunc:
        if get_enums_func is not None:
            return get_enums_func
        return partial(
            get_enums_with_description,
            description_func=job.description_func,
            allow_duplicates=allow_duplicates,
        )

    return _run_jobs(jobs, dest_dir, enums_for, extension, result)


def generate_index(
    jobs: Iterable[ParseJob],
    extra_enums: Iterable[str],
    dest_dir: str | Path,
    extension: str = "ts",
) -> Path:
    """Write the index file re-exporting every job's enum plus the extra enums."""
    content = create_index_content((job.enum_name for job in jobs), extra_enums)
    path = write_file("index", dest_dir, content, extension)
    status.success_generation(f"[{path.name}]")
    return path


def run_batch(config: BatchConfig, dest_dir: str | Path | None = None) -> BatchResult:
    """Run every job of a config in order, then write the index if enabled."""
    dest = Path(dest_dir) if dest_dir is not None else config.dest_path
    jobs = config.build_jobs()
    result = BatchResult(output_dir=dest)

    for job in jobs:
        run = parse_enums_with_description if job.has_description else parse_enums
        run(
            [job],
            dest,
            extension=config.extension,
            allow_duplicates=config.allow_duplicates,
            result=result,
        )

    if config.index:
        result.index_path = generate_index(jobs, config.extra_enums, dest, config.extension)
        result.files_created.append(result.index_path)
    else:
        status.ignore_generation(f"[index.{config.extension}]")
        result.ignored.append("index")

    return result
