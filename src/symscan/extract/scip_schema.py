"""Protobuf message classes for the subset of scip.proto read by symscan.

Only the fields needed to find symbol occurrences are declared. Field numbers
match upstream ``scip.proto`` so any conforming ``index.scip`` decodes; every
other field is retained as an unknown field and never inspected.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.message import Message

SCIP_PACKAGE = "scip"
SCIP_SUBSET_PROTO_NAME = "symscan/scip_subset.proto"

_FIELD = descriptor_pb2.FieldDescriptorProto


@dataclass(frozen=True)
class ScipMessages:
    """Message classes for the SCIP Index/Document/Occurrence subset."""

    index: type[Message]
    document: type[Message]
    occurrence: type[Message]


def scip_subset_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    """Return the file descriptor for the SCIP subset schema.

    Returns
    -------
    descriptor_pb2.FileDescriptorProto
        Descriptor declaring ``scip.Index``, ``scip.Document`` and ``scip.Occurrence``.
    """
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=SCIP_SUBSET_PROTO_NAME,
        package=SCIP_PACKAGE,
        syntax="proto3",
    )

    occurrence = file_proto.message_type.add(name="Occurrence")
    occurrence.field.add(
        name="range",
        number=1,
        type=_FIELD.TYPE_INT32,
        label=_FIELD.LABEL_REPEATED,
    )
    occurrence.field.add(
        name="symbol",
        number=2,
        type=_FIELD.TYPE_STRING,
        label=_FIELD.LABEL_OPTIONAL,
    )

    document = file_proto.message_type.add(name="Document")
    document.field.add(
        name="relative_path",
        number=1,
        type=_FIELD.TYPE_STRING,
        label=_FIELD.LABEL_OPTIONAL,
    )
    document.field.add(
        name="occurrences",
        number=2,
        type=_FIELD.TYPE_MESSAGE,
        label=_FIELD.LABEL_REPEATED,
        type_name=f".{SCIP_PACKAGE}.Occurrence",
    )

    index = file_proto.message_type.add(name="Index")
    index.field.add(
        name="documents",
        number=2,
        type=_FIELD.TYPE_MESSAGE,
        label=_FIELD.LABEL_REPEATED,
        type_name=f".{SCIP_PACKAGE}.Document",
    )
    return file_proto


@lru_cache(maxsize=1)
def scip_messages() -> ScipMessages:
    """Build the SCIP subset message classes in a private descriptor pool.

    A private pool keeps these definitions from clashing with protoc-generated
    ``scip_pb2`` bindings registered in the default pool.

    Returns
    -------
    ScipMessages
        Message classes for the subset schema.
    """
    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(scip_subset_file_descriptor().SerializeToString())
    return ScipMessages(
        index=message_factory.GetMessageClass(pool.FindMessageTypeByName("scip.Index")),
        document=message_factory.GetMessageClass(pool.FindMessageTypeByName("scip.Document")),
        occurrence=message_factory.GetMessageClass(
            pool.FindMessageTypeByName("scip.Occurrence")
        ),
    )


__all__ = ["ScipMessages", "scip_messages", "scip_subset_file_descriptor"]
