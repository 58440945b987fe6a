import os
import threading
import time
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, render_template_string

from avltree import BalancedTree, EmptyTreeError, parse_keys

app = Flask(__name__)

tree = BalancedTree()
tree_lock = threading.Lock()

STATE: Dict[str, Any] = {"seed_keys": [], "seeded": False}

DEFAULT_SEED_KEYS = os.environ.get("AVL_SEED_KEYS", "0..9")
HOST = os.environ.get("AVL_HOST", "127.0.0.1")
PORT = int(os.environ.get("AVL_PORT", "5000"))

ORDERS = {
    "pre": BalancedTree.pre_order,
    "in": BalancedTree.in_order,
    "post": BalancedTree.post_order,
}


def ok(data=None, **extra):
    payload = {"ok": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)

def err(message: str, status: int = 400, **extra):
    payload = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status

def parse_key(raw: str) -> Optional[int]:
    """Return the path segment as an int, or None if it is not one."""
    try:
        return int((raw or "").strip())
    except ValueError:
        return None

def warm_start(raw_keys: Optional[str] = None):
    """Empty the shared tree and insert the configured seed keys."""
    raw = DEFAULT_SEED_KEYS if raw_keys is None else raw_keys
    try:
        keys = parse_keys(raw)
    except ValueError as e:
        print(f"[warm_start] Bad AVL_SEED_KEYS {raw!r}: {e}")
        keys = []

    t0 = time.time()
    with tree_lock:
        tree.destroy()
        for key in keys:
            tree.insert(key)
        STATE["seed_keys"] = keys
        STATE["seeded"] = True
        size, height = len(tree), tree.height()
    t1 = time.time()
    print(f"[warm_start] Tree seeded: {size:,} keys, height {height} in {t1 - t0:.4f}s")


@app.get("/api/status")
def api_status():
    with tree_lock:
        empty = tree.is_empty()
        return ok({
            "size": len(tree),
            "height": tree.height(),
            "min": None if empty else tree.find_min(),
            "max": None if empty else tree.find_max(),
            "valid": tree.is_valid(),
            "seed_keys": STATE["seed_keys"],
            "seeded": STATE["seeded"],
        })


@app.post("/api/tree/insert/<key>")
def api_insert(key: str):
    k = parse_key(key)
    if k is None:
        return err("key must be an integer")
    with tree_lock:
        before = len(tree)
        tree.insert(k)
        return ok({"key": k, "inserted": len(tree) > before, "size": len(tree), "height": tree.height()})


@app.post("/api/tree/remove/<key>")
def api_remove(key: str):
    k = parse_key(key)
    if k is None:
        return err("key must be an integer")
    with tree_lock:
        before = len(tree)
        tree.remove(k)
        return ok({"key": k, "removed": len(tree) < before, "size": len(tree), "height": tree.height()})


@app.get("/api/tree/search/<key>")
def api_search(key: str):
    k = parse_key(key)
    if k is None:
        return err("key must be an integer")
    strategy = (request.args.get("strategy") or "iterative").strip().lower()
    with tree_lock:
        if strategy == "iterative":
            node = tree.search_iterative(k)
        elif strategy == "recursive":
            node = tree.search_recursive(k)
        else:
            return err("strategy must be 'iterative' or 'recursive'")
        return ok({"key": k, "found": node is not None, "strategy": strategy})


@app.get("/api/tree/min")
def api_min():
    with tree_lock:
        try:
            return ok({"min": tree.find_min()})
        except EmptyTreeError as e:
            return err(str(e), 404)


@app.get("/api/tree/max")
def api_max():
    with tree_lock:
        try:
            return ok({"max": tree.find_max()})
        except EmptyTreeError as e:
            return err(str(e), 404)


@app.get("/api/tree/traverse/<order>")
def api_traverse(order: str):
    walk = ORDERS.get(order.strip().lower())
    if walk is None:
        return err("order must be one of: pre, in, post")
    with tree_lock:
        return ok({"order": order, "keys": walk(tree)})


@app.get("/api/tree/structure")
def api_structure():
    with tree_lock:
        return ok({"height": tree.height(), "lines": tree.describe()})


@app.post("/api/tree/destroy")
def api_destroy():
    with tree_lock:
        tree.destroy()
        return ok({"size": len(tree)})


@app.post("/api/tree/reset")
def api_reset():
    warm_start()
    with tree_lock:
        return ok({"size": len(tree), "height": tree.height(), "seed_keys": STATE["seed_keys"]})


HTML = r"""
<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>AVL Tree</title>
<style>
  body { font-family: system-ui, sans-serif; margin: 2rem; }
  pre { background: #f4f4f4; padding: 1rem; }
</style>
</head>
<body>
<h1>AVL Tree</h1>
<p>Size: {{ size }} &middot; Height: {{ height }}</p>
<p>In-order: {{ keys|join(" ") }}</p>
<pre>{% for line in lines %}{{ line }}
{% endfor %}</pre>
</body>
</html>
"""

@app.get("/")
def home():
    with tree_lock:
        return render_template_string(
            HTML,
            size=len(tree),
            height=tree.height(),
            keys=tree.in_order(),
            lines=tree.describe(),
        )

if __name__ == "__main__":
    warm_start()
    app.run(host=HOST, port=PORT, debug=True, use_reloader=False)
