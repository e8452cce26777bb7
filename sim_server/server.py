from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Dict, List
import os

#logging stuff
from sim_logs.loggers import server_logger
from sim_logs.endpoints import router as logs_router
from sim_logs.middleware import RequestLoggingMiddleware

from sim_server.server_classes import DecklistRequest, GenerationOut, DecklistOut
from sim_server.card_utils.card import Card
from sim_server.card_utils.generators import GENERATORS
from sim_server.card_utils.pack_utils import CARD_DATA_PATH, load_catalog
from sim_server.card_utils.pool import classify, filter_cards_by_set
from sim_server.card_utils.stats import calculate_stats
from sim_server.card_utils.export import (
    build_decklist,
    image_fallback_url,
    image_path,
    is_shiny,
)

# loaded once at startup, read-only afterwards
CATALOG: List[Card] = []
CATALOG_BY_ID: Dict[str, Card] = {}

TITLES = {
    "BOX": "Box Contents",
    "PRERELEASE": "Prerelease Pool",
}

app = FastAPI(title="OP14 - EB04 Prerelease Sim")
app.include_router(logs_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware, logger=server_logger)


def set_catalog(cards: List[Card]):
    global CATALOG, CATALOG_BY_ID
    CATALOG = list(cards)
    CATALOG_BY_ID = {card.id: card for card in CATALOG}


def reload_catalog(path=None) -> bool:
    """Load the catalog file. On failure the catalog is emptied and False returned."""
    path = path or CARD_DATA_PATH
    try:
        cards = load_catalog(path)
    except FileNotFoundError:
        server_logger.warning("catalog_missing", path=str(path))
        set_catalog([])
        return False
    except OSError as e:
        server_logger.error("catalog_unreadable", path=str(path), error=str(e))
        set_catalog([])
        return False
    except ValueError as e:
        server_logger.error("catalog_invalid", path=str(path), error=str(e))
        set_catalog([])
        return False

    set_catalog(cards)
    server_logger.info(
        "catalog_loaded",
        path=str(path),
        total_cards=len(CATALOG),
        in_set=len(filter_cards_by_set(CATALOG))
    )
    return True


def card_to_json(card: Card) -> dict:
    return {
        **card.to_dict(),
        "image": image_path(card),
        "shiny": is_shiny(card),
    }


# startup functions
@app.on_event("startup")
async def startup_event():
    if not reload_catalog():
        server_logger.warning("startup_empty_catalog")


@app.get("/")
async def read_root():
    return {"service": "prerelease-sim", "sets": ["OP14", "EB04"], "catalog_size": len(CATALOG)}


@app.get("/card_pool")
async def card_pool_summary():
    """Sizes of the catalog, the filtered pool and every rarity tier."""
    pool = filter_cards_by_set(CATALOG)
    return {
        "catalog_size": len(CATALOG),
        "pool_size": len(pool),
        "tiers": classify(pool).counts()
    }


def _open(mode: str) -> JSONResponse:
    cards = GENERATORS[mode](CATALOG)
    stats = calculate_stats(cards)

    #log code
    server_logger.info(
        "packs_opened",
        mode=mode,
        cards_drawn=len(cards),
        hits=stats.hits,
        srs=stats.srs
    )

    body = GenerationOut(
        mode=mode,
        title=TITLES[mode],
        total=len(cards),
        stats=stats.to_dict(),
        cards=[card_to_json(card) for card in cards],
    )
    return JSONResponse(status_code=201, content=body.model_dump())


@app.post("/open_box")
async def open_box():
    """Open a full 24-pack box."""
    return _open("BOX")


@app.post("/open_prerelease")
async def open_prerelease():
    """Open the 6 prerelease packs."""
    return _open("PRERELEASE")


@app.post("/decklist")
async def export_decklist(req: DecklistRequest):
    """Turn a list of drawn card ids into `<count>x<id>` decklist lines."""
    if not req.card_ids:
        server_logger.warning("decklist_empty_request")
        return JSONResponse(status_code=400, content={"error": "No cards to export"})

    unknown = sorted({card_id for card_id in req.card_ids if card_id not in CATALOG_BY_ID})
    if unknown:
        server_logger.warning("decklist_unknown_cards", unknown=unknown)
        return JSONResponse(status_code=404, content={"error": f"Unknown card ids: {unknown}"})

    decklist = build_decklist(CATALOG_BY_ID[card_id] for card_id in req.card_ids)
    body = DecklistOut(decklist=decklist, lines=len(decklist.splitlines()))

    server_logger.info("decklist_exported", cards=len(req.card_ids), lines=body.lines)
    return JSONResponse(status_code=200, content=body.model_dump())


@app.get("/card_image/{card_id}")
async def card_image(card_id: str):
    card = CATALOG_BY_ID.get(card_id)
    if card is None:
        server_logger.warning("card_image_not_found", card_id=card_id)
        return JSONResponse(status_code=404, content={"error": f"Card '{card_id}' not found"})
    return {
        "card_id": card.id,
        "path": image_path(card),
        "fallback_url": image_fallback_url(card)
    }


@app.post("/admin/reload_catalog")
async def admin_reload_catalog():
    """
    Admin endpoint: re-read the catalog file.
    """
    server_logger.info("admin_reload_catalog_invoked")

    if not reload_catalog():
        return JSONResponse(status_code=500, content={
            "error": f"Could not load catalog from {CARD_DATA_PATH}"
        })

    return JSONResponse(status_code=200, content={
        "message": "Catalog reloaded",
        "catalog_size": len(CATALOG)
    })


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", "8000")))
