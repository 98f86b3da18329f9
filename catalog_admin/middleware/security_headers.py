from fastapi import Request

from catalog_admin.config import settings

def add_security_headers(app):
    @app.middleware("http")
    async def security_headers_mw(request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer-when-downgrade"
        # stored image names are unique per upload, so they never change
        if request.url.path.startswith(settings.UPLOAD_URL_PATH.rstrip("/") + "/"):
            response.headers["Cache-Control"] = "public, max-age=86400"
        return response
