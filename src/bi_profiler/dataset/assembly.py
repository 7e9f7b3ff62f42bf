"""Dataset assembly.

Turns a normalized row payload (sequence of mappings from column name to raw
scalar) into a profiled Dataset. Whether rows came from CSV, a spreadsheet or a
warehouse query does not matter here; file decoding happens upstream.

Assembly is atomic: either a complete Dataset is returned or an exception is
raised. Relationship and suggestion slots start empty and are only filled by
analyze_dataset().
"""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from bi_profiler.analysis.statistics.profiler import compute_column_stats
from bi_profiler.analysis.typing.inference import infer_column_type
from bi_profiler.analysis.typing.patterns import get_pattern_config
from bi_profiler.core.logging import (
    end_profiling_metrics,
    get_logger,
    log_context,
    record_columns_processed,
    record_operation_timing,
    record_rows_processed,
    start_profiling_metrics,
)
from bi_profiler.core.models.base import Result, SchemaField, SchemaFieldMode
from bi_profiler.dataset.models import Column, Dataset, DatasetMetadata

logger = get_logger(__name__)

DEFAULT_ORIGINAL_TYPE = "string"


class EmptyDataError(ValueError):
    """Raised when there are no rows to profile.

    Column names cannot be discovered from zero rows.
    """


@dataclass
class ProfileRequest:
    """One payload to profile with profile_many()."""

    id: str
    name: str
    source_id: str
    rows: Sequence[Mapping[str, Any]]
    schema: Sequence[SchemaField] | None = None


def discover_column_names(rows: Sequence[Mapping[str, Any]]) -> list[str]:
    """Union of row keys in first-seen order."""
    names: dict[str, None] = {}
    for row in rows:
        for key in row:
            names.setdefault(key, None)
    return list(names)


def profile_column(
    name: str,
    values: Sequence[Any],
    original_type: str = DEFAULT_ORIGINAL_TYPE,
    required: bool | None = None,
) -> Column:
    """Infer the type and compute stats for one column.

    Args:
        name: Column name
        values: Raw values, nulls included
        original_type: Type label declared by the source
        required: Source-declared requiredness; None derives nullability from the data

    Returns:
        Profiled Column
    """
    pattern_config = get_pattern_config()
    column_type = infer_column_type(values, pattern_config)
    stats = compute_column_stats(values, column_type, pattern_config)

    nullable = stats.null_count > 0 if required is None else not required

    return Column(
        name=name,
        type=column_type,
        original_type=original_type,
        nullable=nullable,
        unique=stats.unique_count == stats.count,
        stats=stats,
    )


def assemble(
    id: str,
    name: str,
    source_id: str,
    rows: Sequence[Mapping[str, Any]],
    *,
    schema: Sequence[SchemaField] | None = None,
) -> Dataset:
    """Profile a row payload into a Dataset.

    Args:
        id: Dataset ID
        name: Display name
        source_id: ID of the data source the rows came from
        rows: Row mappings; a key missing from a row reads as null
        schema: Optional source-declared schema (warehouse results). When
            given, it fixes column order, original types and nullability.

    Returns:
        Profiled Dataset

    Raises:
        EmptyDataError: If rows is empty
    """
    if not rows:
        raise EmptyDataError(f"No rows to profile for dataset {id!r}")

    row_list = [dict(row) for row in rows]
    metrics = start_profiling_metrics(id)

    try:
        with log_context(dataset_id=id, source_id=source_id):
            columns = []
            for field in _column_fields(row_list, schema):
                started = time.perf_counter()
                values = [row.get(field.name) for row in row_list]
                required = None if schema is None else field.mode == SchemaFieldMode.REQUIRED
                column = profile_column(
                    field.name,
                    values,
                    original_type=field.type,
                    required=required,
                )
                columns.append(column)
                record_operation_timing(f"column:{field.name}", time.perf_counter() - started)
                logger.debug(
                    "column_profiled",
                    column=column.name,
                    type=column.type.value,
                    null_count=column.stats.null_count,
                    unique_count=column.stats.unique_count,
                )

            record_columns_processed(len(columns))
            record_rows_processed(len(row_list))

            dataset = Dataset(
                id=id,
                name=name,
                source_id=source_id,
                columns=columns,
                row_count=len(row_list),
                rows=row_list,
                metadata=DatasetMetadata(analyzed_at=datetime.now(UTC)),
            )
    finally:
        end_profiling_metrics()

    logger.info("dataset_assembled", **metrics.to_dict())
    return dataset


def _column_fields(
    rows: list[dict[str, Any]], schema: Sequence[SchemaField] | None
) -> list[SchemaField]:
    """Columns to profile: the declared schema, or every key seen in the rows."""
    if schema is not None:
        return list(schema)
    return [SchemaField(name=n, type=DEFAULT_ORIGINAL_TYPE) for n in discover_column_names(rows)]


def profile_many(requests: Sequence[ProfileRequest]) -> list[Result[Dataset]]:
    """Profile several payloads independently.

    A failure in one payload is reported in its Result and does not affect
    the others.

    Args:
        requests: Payloads to profile

    Returns:
        One Result per request, in request order
    """
    results: list[Result[Dataset]] = []
    for request in requests:
        try:
            dataset = assemble(
                request.id,
                request.name,
                request.source_id,
                request.rows,
                schema=request.schema,
            )
        except EmptyDataError as e:
            logger.warning("dataset_skipped", dataset_id=request.id, error=str(e))
            results.append(Result.fail(str(e)))
            continue
        except Exception as e:
            logger.exception("dataset_profiling_failed", dataset_id=request.id)
            results.append(Result.fail(f"Profiling failed: {e}"))
            continue
        results.append(Result.ok(dataset))
    return results
