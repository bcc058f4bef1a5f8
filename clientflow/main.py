import logging

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from clientflow.config import LOG_LEVEL
from clientflow.routes.budget_routes import router as budget_router
from clientflow.routes.notification_routes import router as notification_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s %(message)s",
)

app = FastAPI(title="ClientFlow Budget Watch")


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """Answers browser preflights with the CORS headers and no body."""

    def preflight_response(self, request_headers) -> Response:
        response = super().preflight_response(request_headers)
        headers = {
            k: v for k, v in response.headers.items()
            if k.lower() not in ("content-length", "content-type")
        }
        return Response(status_code=response.status_code, headers=headers)


@app.get("/api/v1/health-check")
async def health():
    return {"status": "ok", "message": "Backend is alive!"}


# Edge-function style CORS: any origin, Supabase client headers
app.add_middleware(
    EmptyPreflightCORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Client-Info", "Apikey"],
)

app.include_router(budget_router)
app.include_router(notification_router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("clientflow.main:app", host="0.0.0.0", port=8000, reload=True)
