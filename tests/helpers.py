"""Writers that lay out a fake project root under tmp_path."""

import json


def write_manifest(root, version="19.2.0", react="^19.2.0", react_dom="^19.2.0", **extra):
    data = {
        "name": "react-umd",
        "version": version,
        "devDependencies": {"react": react, "react-dom": react_dom},
    }
    data.update(extra)
    (root / "package.json").write_text(json.dumps(data, indent=2), encoding="utf-8")


def write_installed(root, version, name="react"):
    pkg_dir = root / "node_modules" / name
    pkg_dir.mkdir(parents=True, exist_ok=True)
    (pkg_dir / "package.json").write_text(
        json.dumps({"name": name, "version": version}), encoding="utf-8"
    )


def write_dist(root, dist_file, first_line, body="(function(){})();\n"):
    path = root / dist_file
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"{first_line}\n{body}", encoding="utf-8")
    return path


def write_dist_bytes(root, dist_file, content: bytes):
    path = root / dist_file
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path
