from fastapi import FastAPI, HTTPException

from .schemas import TreePayload, AnnotatePayload, AnnotateResponse, TreeStats
from .utils import annotate_with
from ..data.reader import parse_data


def make_app() -> FastAPI:
    app = FastAPI()

    @app.post('/annotate', response_model=AnnotateResponse)
    async def annotate(payload: AnnotatePayload):
        try:
            return annotate_with(parse_data(payload.tree), start_id=payload.start_id, policy=payload.policy)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    @app.post('/size', response_model=TreeStats)
    async def size(payload: TreePayload):
        try:
            tree = parse_data(payload.tree)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return TreeStats(size=tree.size(), depth=tree.depth())

    return app


def main(host: str, port: int):
    import uvicorn

    print('Starting annotation server...')
    uvicorn.run(make_app(), host=host, port=port, reload=False)
