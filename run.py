import os

import uvicorn

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    # Routes are sync and run in the threadpool; one worker keeps a single
    # shared catalog client per process.
    workers = int(os.environ.get("WEB_CONCURRENCY", 1))
    uvicorn.run(
        "tyre_finder.main:app",
        host="0.0.0.0",
        port=port,
        workers=workers,
    )
