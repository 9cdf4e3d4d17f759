from __future__ import annotations

import pytest

from openapi_slim_types.pipeline.schema_ast import SchemaParser

from .builders import components, obj, ref


@pytest.fixture
def petstore_document():
    return components(
        Pet=obj(["id", "name"], id={"type": "integer", "format": "int64"}, name={"type": "string"}, tag={"type": "string"}),
        Pets={"type": "array", "items": ref("Pet")},
        Error=obj(["code", "message"], code={"type": "integer", "format": "int32"}, message={"type": "string"}),
    )


@pytest.fixture
def parse():
    def _parse(document):
        return SchemaParser().parse(document)

    return _parse
