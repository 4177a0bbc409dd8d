"""
HTTP webhook surface of the NetSuite endpoint.

Every route parses its JSON body into an event, hands it to the order
lifecycle coordinator and answers with the response envelope. Failures are
answered with status 500 and an error notification carrying the traceback.
"""

import logging
import os
import traceback
from time import time
from typing import Any, Optional

import uvicorn
from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse

from netsuite_endpoint.config import load_config
from netsuite_endpoint.netsuite.netsuite_client import NetSuiteClient
from netsuite_endpoint.schemas import EndpointResponse, parse_event
from netsuite_endpoint.sinks import NetSuiteEndpointSink
from netsuite_endpoint.zeep_soap_client import NetsuiteSoapClient

LOGGER = logging.getLogger(__name__)


def create_app(config=None, ns_client=None) -> FastAPI:
    """Builds the application; the NetSuite client is created once here and shared by all requests."""
    config = config if config is not None else load_config()
    ns_client = ns_client or NetSuiteClient(NetsuiteSoapClient(config))

    app = FastAPI(title="NetSuite Endpoint")
    app.state.config = config
    app.state.sink = NetSuiteEndpointSink(config, ns_client)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_start_time = time()
        LOGGER.info(f"Start NetSuite API Request for {request.url.path}")
        response = await call_next(request)
        LOGGER.info(
            f"End NetSuite API Request for {request.url.path} in {round(time() - request_start_time, 4)}s"
        )
        return response

    @app.post("/add_order")
    def add_order(request: Request, body: Optional[Any] = Body(None)):
        return dispatch(request, "add_order", body)

    @app.post("/update_order")
    def update_order(request: Request, body: Optional[Any] = Body(None)):
        return dispatch(request, "update_order", body)

    @app.post("/shipments")
    def shipments(request: Request, body: Optional[Any] = Body(None)):
        return dispatch(request, "shipments", body)

    @app.post("/inventory_stock")
    def inventory_stock(request: Request, body: Optional[Any] = Body(None)):
        return dispatch(request, "inventory_stock", body)

    @app.post("/products")
    def products(request: Request, body: Optional[Any] = Body(None)):
        return dispatch(request, "products", body)

    @app.post("/get_shipments")
    def get_shipments(request: Request, body: Optional[Any] = Body(None)):
        return dispatch(request, "get_shipments", body)

    return app


def dispatch(request: Request, kind, body) -> JSONResponse:
    request_id = body.get("request_id") if isinstance(body, dict) else None
    try:
        event = parse_event(kind, body)
        result = request.app.state.sink.process_event(event)
        status_code = 200
    except Exception as exc:
        LOGGER.exception(f"{kind} failed: {exc}")
        result = EndpointResponse(summary=str(exc))
        result.add_notification("error", str(exc), traceback.format_exc())
        status_code = 500

    result.request_id = request_id
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))


def main():
    config = load_config()
    logging.basicConfig(
        level=str(config.get("log_level") or "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    uvicorn.run(
        create_app(config),
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000"))
    )


if __name__ == "__main__":
    main()
