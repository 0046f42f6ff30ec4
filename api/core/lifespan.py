from __future__ import annotations

import logging
import random
from contextlib import asynccontextmanager

from fastapi import FastAPI

from bizusecase.catalog import default_catalog, default_library
from bizusecase.config import generator_seed, load_config
from bizusecase.engine import UseCaseGenerator

from .config import get_config_path, get_log_level
from ..services.portfolio_service import PortfolioService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config_path = get_config_path()
    cfg = load_config(config_path)
    logging.basicConfig(level=getattr(logging, get_log_level(cfg), logging.INFO))

    seed = generator_seed(cfg)
    generator = UseCaseGenerator(
        catalog=default_catalog(),
        templates=default_library(),
        rng=random.Random(seed),
    )

    api_cfg = cfg.get("api") or {}
    app.state.cfg = cfg
    app.state.generator = generator
    app.state.portfolio_service = PortfolioService(generator=generator)
    app.state.default_top_count = int(api_cfg.get("default_top_count", 5))

    logger.info(
        "Use case engine ready: %d domains, seed=%s, config=%s",
        len(generator.domains),
        seed,
        config_path,
    )
    yield
