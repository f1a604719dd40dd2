"""Tests API — endpoints registry, normalisation, duplication, validation, publication."""


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "blocks": 15}


# ── Registry ─────────────────────────────────────────────────────────────────

def test_list_block_types(client):
    types = client.get("/cms/blocks/types").json()["types"]
    assert len(types) == 15
    faq = next(t for t in types if t["type"] == "faq")
    assert faq == {"type": "faq", "label": "FAQ", "allowInlineEdit": False, "enableInnerPanel": True}


def test_get_block_type(client):
    data = client.get("/cms/blocks/team").json()
    assert data["label"] == "Team"
    assert data["defaults"]["members"][0]["id"] == "member-0"
    assert data["inspectorFields"][0]["group"] == "basics"
    assert "showWhen" in next(f for f in data["inspectorFields"] if f["key"] == "containerBackgroundColor")
    assert data["jsonSchema"]["type"] == "object"


def test_get_unknown_block_type(client):
    assert client.get("/cms/blocks/carousel").status_code == 404


# ── Blocs ────────────────────────────────────────────────────────────────────

def test_normalize(client):
    r = client.post("/cms/blocks/normalize", json={"blocks": [
        {"id": "b1", "type": "text", "props": {"content": "Hallo Welt"}},
        {"id": "b2", "type": "text", "props": "kaputt"},
    ]})
    assert r.status_code == 200
    blocks = r.json()["blocks"]
    assert blocks[0]["props"]["content"] == "Hallo Welt"
    assert blocks[1]["props"]["content"] == "Textinhalt hier eingeben..."


def test_normalize_unknown_type_rejected(client):
    r = client.post("/cms/blocks/normalize", json={"blocks": [{"id": "b1", "type": "carousel"}]})
    assert r.status_code == 422


def test_duplicate(client):
    r = client.post("/cms/blocks/duplicate", json={
        "id": "b1", "type": "faq", "props": {"items": [{"id": "f1", "question": "Wie?", "answer": "So."}]},
    })
    data = r.json()
    assert data["id"] != "b1"
    assert data["props"]["items"][0]["id"] != "f1"


# ── Pages ────────────────────────────────────────────────────────────────────

def test_validate_ok(client):
    r = client.post("/cms/pages/validate", json={"blocks": []})
    assert r.json() == {"ok": True}


def test_validate_malformed_page(client):
    data = client.post("/cms/pages/validate", json={"title": "Start"}).json()
    assert data["ok"] is False
    assert data["issues"][0]["blockType"] == "unknown"


def test_publish_ok(client):
    r = client.post("/cms/pages/publish", json={
        "title": "Start",
        "blocks": [{"id": "b1", "type": "text", "props": {"content": "Genug Inhalt hier."}}],
    })
    assert r.status_code == 200
    assert r.json()["status"] == "published"
    assert r.json()["title"] == "Start"


def test_publish_blocked(client):
    r = client.post("/cms/pages/publish", json={
        "blocks": [{"id": "b1", "type": "faq", "props": {"items": []}}],
    })
    assert r.status_code == 422
    assert r.json()["issues"] == [{
        "blockId": "b1", "blockType": "faq", "fieldPath": "items",
        "message": "Mindestens eine FAQ erforderlich",
    }]
