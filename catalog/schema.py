from rest_framework.schemas.openapi import AutoSchema


class CatalogAutoSchema(AutoSchema):
    """
    OpenAPI operations for views that are shared between collections.

    One view function serves every collection, so operation ids and tags are
    taken from the URL rather than the view name.
    """

    def _path_parts(self, path):
        parts = [part for part in path.strip("/").split("/") if part]
        if parts and parts[0] == "api":
            parts = parts[1:]
        return parts

    def get_operation_id(self, path, method):
        words = [part.strip("{}").replace("-", "_") for part in self._path_parts(path)]
        return method.lower() + "".join(word.title().replace("_", "") for word in words)

    def get_tags(self, path, method):
        if self._tags:
            return self._tags
        parts = self._path_parts(path)
        if not parts:
            return ["site"]
        return [parts[0]]
