from fastapi import FastAPI
import logging

from feast.api.errors import install_error_handlers
from feast.api.routes import courses, events, fb_report, menu_items, procurement, shopping_list

# Logging
logger = logging.getLogger("feast_app")

# Initialize FastAPI app
app = FastAPI(title="Event Menu & Shopping List API")
install_error_handlers(app)

# Include routers
app.include_router(events.router)
app.include_router(courses.router)
app.include_router(menu_items.router)
app.include_router(shopping_list.router)
app.include_router(procurement.router)
app.include_router(fb_report.router)


@app.get("/health")
def health():
    return {"status": "ok"}
