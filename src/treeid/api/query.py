def main(
    file: str,
    start_id: int,
    policy: str,
    host: str,
    port: int,
):
    import requests
    from json import dumps
    from .schemas import AnnotatePayload
    from .utils import read_json

    url = f'http://{host}:{port}/annotate'
    payload = AnnotatePayload(tree=read_json(file), start_id=start_id, policy=policy)
    response = requests.post(url=url, json=payload.model_dump())

    if response.status_code == 200:
        print(dumps(response.json(), indent=4, ensure_ascii=False))
    else:
        print(f'Received status code {response.status_code}: {response.text}')
