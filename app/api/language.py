from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.api.deps import get_language_store
from app.core.exceptions.exceptions import UnsupportedLanguageError
from app.schemas.language import LanguageOut, LanguageUpdate
from app.services.language import LanguagePreferenceStore

router = APIRouter(prefix="/api/language", tags=["Language"])

# browser local storage has no expiry; ten years is the cookie equivalent
COOKIE_MAX_AGE = 10 * 365 * 24 * 60 * 60


def _persist_to(response: Response, store: LanguagePreferenceStore) -> None:
    store.subscribe(
        lambda language: response.set_cookie(
            store.key, language, max_age=COOKIE_MAX_AGE, samesite="lax",
        )
    )


def _out(store: LanguagePreferenceStore) -> LanguageOut:
    language = store.current()
    return LanguageOut(language=language, label=store.label(language))


@router.get("", response_model=LanguageOut, summary="Current language preference")
async def get_language(store: LanguagePreferenceStore = Depends(get_language_store)) -> LanguageOut:
    return _out(store)


@router.post("/toggle", response_model=LanguageOut, summary="Flip between English and Chinese")
async def toggle_language(
    response: Response,
    store: LanguagePreferenceStore = Depends(get_language_store),
) -> LanguageOut:
    _persist_to(response, store)
    store.toggle()
    return _out(store)


@router.put("", response_model=LanguageOut, summary="Set the language preference")
async def set_language(
    req: LanguageUpdate,
    response: Response,
    store: LanguagePreferenceStore = Depends(get_language_store),
) -> LanguageOut:
    _persist_to(response, store)
    try:
        store.set(req.language)
    except UnsupportedLanguageError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.message)
    return _out(store)
