"""REST API for the nbarank analysis."""

from __future__ import annotations

import argparse
import json
import logging
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

import uvicorn
from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from nbarank.analysis import AnalysisResult, run_analysis
from nbarank.api.schemas import AnalysisResponse
from nbarank.config import ConfigurationError, load_config
from nbarank.ingest import load_records_from_csv
from nbarank.reports import REPORT_NAMES, report_to_csv, resolve_report


logger = logging.getLogger(__name__)


def _parse_mapping(mapping_str: str | None) -> dict[str, str]:
    if not mapping_str:
        return {}
    try:
        mapping = json.loads(mapping_str)
    except json.JSONDecodeError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid mapping JSON: {exc}") from exc
    if not isinstance(mapping, dict):
        raise HTTPException(status_code=400, detail="Mapping JSON must be an object")
    return {str(key): str(value) for key, value in mapping.items()}


async def _write_temp(upload: UploadFile | None) -> Path | None:
    if upload is None:
        return None
    contents = await upload.read()
    if not contents:
        return None
    tmp = tempfile.NamedTemporaryFile(delete=False, suffix=".csv")
    try:
        tmp.write(contents)
        tmp.flush()
    finally:
        tmp.close()
    return Path(tmp.name)


async def _analyze_upload(
    seasons: UploadFile,
    top_n: int | None,
    column_mapping: str | None,
) -> AnalysisResult:
    mapping = _parse_mapping(column_mapping)
    try:
        config = load_config(top_n)
    except ConfigurationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    path = await _write_temp(seasons)
    if path is None:
        raise HTTPException(status_code=400, detail="seasons file is empty")
    try:
        records = load_records_from_csv(path, mapping=mapping or None)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    finally:
        path.unlink(missing_ok=True)

    return run_analysis(records, config)


def create_app() -> FastAPI:
    app = FastAPI(title="nbarank analysis")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/analysis", response_model=AnalysisResponse)
    async def analyze(
        seasons: UploadFile = File(...),
        top_n: int | None = Form(None),
        column_mapping: str | None = Form(None),
    ) -> AnalysisResponse:
        result = await _analyze_upload(seasons, top_n, column_mapping)
        return AnalysisResponse.model_validate(asdict(result))

    @app.post("/analysis/export/{report}")
    async def export_report(
        report: str,
        seasons: UploadFile = File(...),
        top_n: int | None = Form(None),
        column_mapping: str | None = Form(None),
    ) -> Response:
        if report not in REPORT_NAMES:
            raise HTTPException(status_code=404, detail=f"Unknown report {report!r}")
        result = await _analyze_upload(seasons, top_n, column_mapping)
        rows = resolve_report(result, report)
        logger.info("Exporting %s report with %d rows", report, len(rows))
        return Response(
            content=report_to_csv(rows),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename={report}.csv"},
        )

    return app


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Serve the nbarank analysis API")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    parser.add_argument("--log-level", default="info", help="uvicorn log level")
    args = parser.parse_args(argv)

    uvicorn.run(create_app(), host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
