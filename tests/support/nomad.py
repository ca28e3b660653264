"""In-memory stand-in for the Nomad HTTP API."""

from __future__ import annotations

import httpx

NomadPayload = list[dict[str, object]]


def registration(name: str, address: str, *, namespace: str = "default") -> dict[str, object]:
    return {
        "ID": f"_nomad-task-{name}-{address}",
        "ServiceName": name,
        "Namespace": namespace,
        "NodeID": "node-1",
        "Datacenter": "dc1",
        "JobID": name,
        "AllocID": "alloc-1",
        "Tags": None,
        "Address": address,
        "Port": 8080,
    }


class FakeNomadAPI:
    """Answers the three catalogue endpoints from in-memory tables."""

    def __init__(
        self,
        *,
        namespaces: list[str],
        services: dict[str, list[tuple[str, list[str] | None]]],
        registrations: dict[tuple[str, str], NomadPayload],
    ) -> None:
        self.namespaces = namespaces
        self.services = services
        self.registrations = registrations

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        namespace = request.url.params.get("namespace", "")
        if path == "/v1/namespaces":
            namespaces = [{"Name": ns, "Description": ""} for ns in self.namespaces]
            return httpx.Response(200, json=namespaces)
        if path == "/v1/services":
            stubs = [
                {"ServiceName": name, "Tags": tags}
                for name, tags in self.services.get(namespace, [])
            ]
            return httpx.Response(200, json=[{"Namespace": namespace, "Services": stubs}])
        if path.startswith("/v1/service/"):
            name = path.removeprefix("/v1/service/")
            return httpx.Response(200, json=self.registrations.get((namespace, name), []))
        return httpx.Response(404, text="not found")
