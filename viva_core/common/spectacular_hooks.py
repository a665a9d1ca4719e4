from __future__ import annotations


def preprocess_exclude_legacy_api(endpoints):
    """
    ROOT_URLCONF mounts the API twice:
      /api/v1/  (primary)
      /api/     (unversioned alias kept for older clients)

    Without filtering, drf-spectacular documents both and produces duplicate
    operationIds (list2, retrieve2, ...). Only /api/v1/* is kept in the schema.
    """
    return [
        (path, path_regex, method, callback)
        for path, path_regex, method, callback in endpoints
        if path.startswith("/api/v1/") or not path.startswith("/api/")
    ]
