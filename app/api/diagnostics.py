import asyncio
import json
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api.deps import get_language_store, get_prober
from app.services.language import LanguagePreferenceStore, translate
from app.services.prober_service import ConnectivityProber

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["Diagnostics"])


@router.get("/test", response_class=HTMLResponse, summary="Connectivity test page")
async def diagnostics_page(
    request: Request,
    prober: ConnectivityProber = Depends(get_prober),
    store: LanguagePreferenceStore = Depends(get_language_store),
):
    """Render both probe results as raw JSON for a human to read."""
    # one after the other; the probes don't depend on each other
    db_result = await asyncio.to_thread(prober.probe_relational_store)
    redis_result = await asyncio.to_thread(prober.probe_key_value_store)

    language = store.current()
    sections = [
        (translate("diagnostics.relational", language), db_result),
        (translate("diagnostics.key_value", language), redis_result),
    ]
    return templates.TemplateResponse(request, "test.html", {
        "lang": language,
        "title": translate("diagnostics.title", language),
        "sections": [
            {
                "name": name,
                "success": result.success,
                "json": json.dumps(result.to_payload(), indent=2, ensure_ascii=False),
            }
            for name, result in sections
        ],
    })
