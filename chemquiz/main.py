"""
ChemQuiz Web Interface - Main Application

Serves the compound catalog, its manifest, generated quiz questions and
structure depictions as a JSON/SVG API for the quiz front end.

Author: ChemQuiz Development Team
"""

import os
import random
import logging
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel, Field

from chemquiz.chemdata.catalog import (
    Catalog,
    CatalogError,
    CatalogLoadError,
    CategoryNotFoundError,
    MANIFEST_FILENAME,
    load_compound_file,
)
from chemquiz.chemdata.catalog_manifest import CatalogManifest
from chemquiz.chemdata.compounds import (
    Compound,
    compounds_to_dicts,
    find_by_iupac_name,
)
from chemquiz.chemdata.demo_data import DEMO_OPTION_COUNT, demo_catalog
from chemquiz.quiz import QuizError, QuizMode, generate_quiz
from chemquiz.structure_renderer import StructureRenderError, render_compound_svg

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="ChemQuiz", version="1.0.0")

# ==============================================================================
# Configuration
# ==============================================================================

BASE_DIR = Path(__file__).parent.absolute()
CATALOG_DIR = Path(os.getenv("CHEMQUIZ_CATALOG_DIR", str(BASE_DIR.parent / "catalog")))
DEFAULT_OPTION_COUNT = int(os.getenv("CHEMQUIZ_OPTION_COUNT", str(DEMO_OPTION_COUNT)))

# ==============================================================================
# Catalog State
# ==============================================================================

_catalog: Optional[Catalog] = None
_manifest: Optional[CatalogManifest] = None


def get_catalog() -> Catalog:
    """Load the catalog once; falls back to the demo dataset without a catalog directory."""
    global _catalog
    if _catalog is None:
        if CATALOG_DIR.is_dir():
            _catalog = Catalog.from_directory(CATALOG_DIR)
        else:
            logger.warning(f"Catalog directory {CATALOG_DIR} not found - using demo dataset")
            _catalog = demo_catalog()
    return _catalog


def get_manifest() -> CatalogManifest:
    """Read index.json, or derive the manifest from the directory when it is missing."""
    global _manifest
    if _manifest is None:
        index_path = CATALOG_DIR / MANIFEST_FILENAME
        if index_path.exists():
            _manifest = CatalogManifest.load(index_path)
        elif CATALOG_DIR.is_dir():
            _manifest = CatalogManifest.from_directory(CATALOG_DIR)
        else:
            _manifest = CatalogManifest()
    return _manifest


def _catalog_http_error(error: CatalogError) -> HTTPException:
    if isinstance(error, CategoryNotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    return HTTPException(status_code=400, detail=str(error))


def _load_leaf_file(file: str) -> List[Compound]:
    """Load a manifest leaf's data file, refusing paths outside the catalog."""
    catalog_root = CATALOG_DIR.resolve()
    target = (catalog_root / file).resolve()
    try:
        target.relative_to(catalog_root)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"File '{file}' is outside the catalog")

    if not target.is_file():
        raise HTTPException(status_code=404, detail=f"Data file '{file}' not found")

    try:
        return load_compound_file(target)
    except CatalogLoadError as e:
        logger.error(f"Failed to load {target}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


# ==============================================================================
# Request Models
# ==============================================================================

class QuizRequest(BaseModel):
    """Quiz generation request. ``file`` wins over ``path``; neither means the whole catalog."""
    mode: QuizMode = QuizMode.NAME_TO_STRUCTURE
    option_count: int = Field(default_factory=lambda: DEFAULT_OPTION_COUNT)
    path: Optional[List[str]] = None
    file: Optional[str] = None
    seed: Optional[int] = None


# ==============================================================================
# API Endpoints - Catalog
# ==============================================================================

@app.get("/api/environment")
async def get_environment():
    """Report where compounds come from and the default quiz size."""
    catalog = get_catalog()
    return {
        "catalog_dir": str(CATALOG_DIR),
        "catalog_source": "directory" if CATALOG_DIR.is_dir() else "demo",
        "compound_count": len(catalog),
        "default_option_count": DEFAULT_OPTION_COUNT,
    }


@app.get("/api/catalog/paths")
async def list_category_paths():
    """List every selectable category path, including intermediate levels."""
    paths = [list(path) for path in get_catalog().available_paths()]
    return {"paths": paths, "count": len(paths)}


@app.get("/api/catalog/manifest")
async def get_catalog_manifest():
    """Return the manifest tree and its leaves sorted by path."""
    manifest = get_manifest()
    leaves = sorted(manifest.leaves(), key=lambda leaf: leaf.path)
    return {
        "manifest": manifest.to_dict(),
        "leaves": [leaf.to_dict() for leaf in leaves],
    }


@app.get("/api/catalog/compounds")
async def get_compounds_for_path(path: List[str] = Query(default=[])):
    """Get all compounds under a category path, e.g. ?path=Organic&path=Alcohols"""
    try:
        compounds = get_catalog().compounds_for(path)
    except CatalogError as e:
        raise _catalog_http_error(e)
    return {"path": path, "compounds": compounds_to_dicts(compounds), "count": len(compounds)}


# ==============================================================================
# API Endpoints - Quiz
# ==============================================================================

@app.post("/api/quiz")
async def create_quiz(request: QuizRequest):
    """Generate one multiple-choice question."""
    if request.file is not None:
        dataset = _load_leaf_file(request.file)
    elif request.path is not None:
        try:
            dataset = get_catalog().compounds_for(request.path)
        except CatalogError as e:
            raise _catalog_http_error(e)
    else:
        dataset = get_catalog().all_compounds()

    rng = random.Random(request.seed)
    try:
        item = generate_quiz(rng, dataset, request.mode, request.option_count)
    except QuizError as e:
        raise HTTPException(status_code=400, detail=str(e))

    answer = item.answer
    result = item.to_dict()
    result["hint"] = answer.hint() if answer else None
    result["answer_smiles"] = answer.smiles if answer else None
    return result


# ==============================================================================
# API Endpoints - Structures
# ==============================================================================

@app.get("/api/structure/{iupac_name}.svg")
async def get_structure_svg(iupac_name: str):
    """Draw a catalog compound's structure as SVG."""
    compound = find_by_iupac_name(get_catalog().all_compounds(), iupac_name)
    if compound is None:
        raise HTTPException(status_code=404, detail=f"Compound '{iupac_name}' not found")

    try:
        svg = render_compound_svg(compound)
    except StructureRenderError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return Response(content=svg, media_type="image/svg+xml")


# ==============================================================================
# Startup Events
# ==============================================================================

@app.on_event("startup")
async def startup_event():
    logger.info("ChemQuiz Web Interface started")
    logger.info(f"Catalog: {len(get_catalog())} compounds available")


# ==============================================================================
# Main Entry Point
# ==============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=5005, log_level="info")
