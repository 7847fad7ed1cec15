import json
import logging

from fastapi import FastAPI, Form
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from .config import load_api_config, load_config
from .log import configure_logging
from .models.result import ReportFailure
from .services.report_common import REPORT_COLUMNS, build_report_rows, render_html_table
from .services.report_service import generate_report
from .version import __version__

CONFIG = load_config()
configure_logging(CONFIG)
API_CONFIG = load_api_config(CONFIG)

log = logging.getLogger("warstats.server")

app = FastAPI(title="warstats")

# failures caused by the account rather than by the upstream call
NOT_FOUND_KINDS = {"no_faction", "no_war"}

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Ranked War Report</title>
</head>
<body>
<h1>Ranked War Report</h1>
<form method="post" action="/report"
      onsubmit="document.getElementById('spinner').style.display = 'block';">
  <label for="api-key">API key</label>
  <input id="api-key" name="api_key" type="password" required>
  <button id="submit" type="submit">Generate</button>
</form>
<div id="spinner" style="display: none;">Fetching attacks, this can take a few minutes&hellip;</div>
@@TABLE@@
@@ALERT@@
</body>
</html>
"""


class ReportRequest(BaseModel):
    api_key: str


def render_page(rows=(), alert_message: str | None = None) -> str:
    alert = ""
    if alert_message:
        # keep "</script>" out of the inline script
        message = json.dumps(alert_message).replace("</", "<\\/")
        alert = f"<script>alert({message});</script>"
    return PAGE_TEMPLATE.replace("@@TABLE@@", render_html_table(rows)).replace("@@ALERT@@", alert)


@app.get("/", response_class=HTMLResponse)
def index():
    return render_page()


@app.post("/report", response_class=HTMLResponse)
def report_page(api_key: str = Form(...)):
    result = generate_report(api_key, config=API_CONFIG)
    if isinstance(result, ReportFailure):
        return render_page(alert_message=result.message)
    return render_page(build_report_rows(result.members))


@app.post("/api/report")
def report_json(body: ReportRequest):
    result = generate_report(body.api_key, config=API_CONFIG)
    if isinstance(result, ReportFailure):
        status = 404 if result.kind in NOT_FOUND_KINDS else 502
        return JSONResponse({"error": result.message, "kind": result.kind}, status_code=status)

    return {
        "faction_id": result.faction_id,
        "war_id": result.war_id,
        "start": result.window.start,
        "end": result.window.end,
        "attack_count": result.attack_count,
        "columns": REPORT_COLUMNS,
        "rows": build_report_rows(result.members),
    }


@app.get("/health")
def health():
    return {
        "status": "ok",
        "service": "warstats",
        "version": __version__,
    }
