"""
API CMS — registry, normalisation, duplication, validation de publication.

GET  /cms/blocks/types           → types de blocs + libellés
GET  /cms/blocks/{block_type}    → defaults, champs d'inspecteur triés, éléments, JSON schema
POST /cms/blocks/normalize       {blocks: [...]}  → blocs à la forme garantie
POST /cms/blocks/duplicate       {id, type, props} → copie avec nouveaux ids
POST /cms/pages/validate         page brute       → {ok} | {ok: false, issues}
POST /cms/pages/publish          page             → page "published" | 422 + issues

Démarrer : uvicorn physio_cms.router:create_app --factory --reload
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .core.config import get_settings
from .core.schemas import INSPECTOR_GROUP_LABELS, Block, PageEnvelope
from .duplicate import duplicate_block
from .normalize import normalize_blocks
from .registry import BLOCK_REGISTRY
from .validation import PublishBlockedError, publish_page, validate_page_for_publish

log = logging.getLogger(__name__)
router = APIRouter(prefix="/cms", tags=["CMS"])


class BlocksIn(BaseModel):
    blocks: List[Block]


# ── Registry ───────────────────────────────────────────────────────────────

@router.get("/blocks/types")
def list_block_types():
    return {
        "types": [
            {
                "type": d.type,
                "label": d.label,
                "allowInlineEdit": d.allow_inline_edit,
                "enableInnerPanel": d.enable_inner_panel,
            }
            for d in BLOCK_REGISTRY.values()
        ],
    }


@router.get("/blocks/{block_type}")
def get_block_type(block_type: str):
    definition = BLOCK_REGISTRY.get(block_type)
    if definition is None:
        raise HTTPException(404, f"Type de bloc inconnu : {block_type}")
    return {
        "type": definition.type,
        "label": definition.label,
        "defaults": definition.defaults,
        "inspectorFields": [
            f.model_dump(by_alias=True, exclude_none=True) for f in definition.sorted_inspector_fields()
        ],
        "groupLabels": INSPECTOR_GROUP_LABELS,
        "elements": [e.model_dump(by_alias=True, exclude_none=True) for e in definition.elements],
        "jsonSchema": definition.json_schema(),
    }


# ── Blocs ──────────────────────────────────────────────────────────────────

@router.post("/blocks/normalize")
def normalize(data: BlocksIn):
    return {"blocks": [b.model_dump() for b in normalize_blocks(data.blocks)]}


@router.post("/blocks/duplicate")
def duplicate(block: Block):
    return duplicate_block(block).model_dump()


# ── Pages ──────────────────────────────────────────────────────────────────

@router.post("/pages/validate")
def validate_page(page: Dict[str, Any] = Body(...)):
    # page brute : une structure invalide devient un problème, pas une 422 FastAPI
    return validate_page_for_publish(page).as_payload()


@router.post("/pages/publish")
def publish(page: PageEnvelope):
    try:
        published = publish_page(page)
    except PublishBlockedError as e:
        log.info("Publication refusée : %d problème(s)", len(e.issues))
        return JSONResponse(
            status_code=422,
            content={"ok": False, "issues": [i.model_dump(by_alias=True) for i in e.issues]},
        )
    return published.model_dump()


# ── App ────────────────────────────────────────────────────────────────────

def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
    logging.getLogger("physio_cms").setLevel(settings.log_level)

    app = FastAPI(title="Physio CMS — Blocs", version="1.0.0", docs_url="/docs")
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok", "blocks": len(BLOCK_REGISTRY)}

    log.info("API CMS prête (%d types de blocs, marque par défaut %s)", len(BLOCK_REGISTRY), settings.default_brand)
    return app
