import logging
from fastapi import FastAPI
from fastapi.responses import JSONResponse, Response
from prometheus_client import Counter, Gauge, generate_latest, CONTENT_TYPE_LATEST

from fibbench import config
from fibbench.cpu_task import busy_cpu_task

logger = logging.getLogger(__name__)

ENV = config.load_env()

app = FastAPI()
TASK_MS = Gauge("task_elapsed_ms", "Elapsed time per request", ["env"])
TASK_RUNS = Counter("task_runs_total", "Benchmark runs served", ["env"])

@app.get("/api/heavy")
def heavy():
    result = busy_cpu_task()
    TASK_MS.labels(env=ENV).set(result["elapsed_ms"])
    TASK_RUNS.labels(env=ENV).inc()
    logger.info("served fib(%d) in %.1f ms", result["n"], result["elapsed_ms"])
    return JSONResponse({"env": ENV, **result})

@app.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
