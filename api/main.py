"""FastAPI application - feature to curl conversion endpoints"""
from pathlib import Path
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

import sys

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from application.services.feature_parser import FeatureCurlParser
from domain.exceptions import MalformedStatementError
from infrastructure.config.settings import load_settings
from infrastructure.feature.file_source import FeatureFileSource, FeatureSourceError
from infrastructure.logging.console_logger import ConsoleLogger


class ConvertRequest(BaseModel):
    """Raw feature script to convert"""
    content: str = Field(description="Feature file content")


class ConvertResponse(BaseModel):
    """Generated curl commands"""
    commands: List[str] = Field(default_factory=list, description="curl commands in document order")
    count: int = Field(description="Number of commands")


class FeatureListResponse(BaseModel):
    """Feature files available for conversion"""
    features: List[str] = Field(default_factory=list, description="Feature ids (file stems)")


app = FastAPI(
    title="feature2curl",
    description="Karate feature files to curl commands",
    version="1.0.0",
)

SETTINGS = load_settings()


@app.get("/")
def read_root():
    """ヘルスチェック"""
    return {"status": "ok", "service": "feature2curl"}


def _feature_source() -> FeatureFileSource:
    return FeatureFileSource(SETTINGS.features_dir, SETTINGS.pattern)


def _convert(content: str, logger: ConsoleLogger) -> ConvertResponse:
    try:
        commands = FeatureCurlParser(logger=logger).parse(content)
    except MalformedStatementError as exc:
        logger.error("conversion.failed", error=str(exc), line_no=exc.line_no)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    logger.info("conversion.done", commands=len(commands))
    return ConvertResponse(commands=commands, count=len(commands))


@app.post("/conversions", response_model=ConvertResponse)
def convert_content(request: ConvertRequest) -> ConvertResponse:
    """Convert feature text posted in the request body"""
    logger = ConsoleLogger().bind(source="inline")
    return _convert(request.content, logger)


@app.get("/features", response_model=FeatureListResponse)
def list_features() -> FeatureListResponse:
    return FeatureListResponse(features=[p.stem for p in _feature_source().list_files()])


@app.get("/features/{feature_id}/commands", response_model=ConvertResponse)
def convert_feature(feature_id: str) -> ConvertResponse:
    """Convert one feature file from the configured features directory"""
    source = _feature_source()
    path = source.find_by_id(feature_id)
    if path is None:
        raise HTTPException(status_code=404, detail=f"Feature file not found: {feature_id}")

    logger = ConsoleLogger().bind(source=str(path))
    try:
        content = source.read(path)
    except FeatureSourceError as exc:
        logger.error("conversion.read_failed", error=str(exc))
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return _convert(content, logger)
