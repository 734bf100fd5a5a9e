# topmark:header:start
#
#   project      : MkFrag
#   file         : documents.py
#   file_relpath : src/mkfrag/config/documents.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fragment documents: TOML tables to serializer records.

A fragment document describes one device. Its sections map onto the three
fragments (see `mkfrag.config.keys.Toml` for the key names)::

    [device]                      # name + vendor
    [modules]                     # radio_files, [[modules.symlinks]]
    [product]                     # namespaces, copy_files, packages, fingerprint,
                                  # proprietary_dir, [[product.blobs]], [product.props.*]
    [board]                       # ab_ota_partitions, board_info

Presence rules:
    - A missing key stays ``None`` so the serializer omits its block.
    - A present but empty array stays ``[]``; the serializer still emits the
      (empty) assignment.
    - Partitions without properties are kept; the serializer skips them.

Mistyped values are reported as warnings in the document's diagnostics and
treated as absent. Missing required keys raise `DocumentError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final

from mkfrag.config.io import (
    get_prop_value_checked,
    get_str_list_or_none_checked,
    get_string_value_or_none_checked,
    get_table_list_checked,
    get_table_or_none_checked,
    is_toml_table,
)
from mkfrag.config.keys import Toml
from mkfrag.config.logging import get_logger
from mkfrag.constants import SYMLINK_MODULE_PREFIX
from mkfrag.core.diagnostics import Diagnostic, DiagnosticLog
from mkfrag.core.errors import DocumentError
from mkfrag.makefile.model import (
    BlobEntry,
    BoardMakefile,
    ModulesMakefile,
    ProductMakefile,
    Symlink,
)
from mkfrag.makefile.naming import sanitize_basename
from mkfrag.makefile.serializers import blob_to_file_copy

if TYPE_CHECKING:
    from mkfrag.config.io import TomlTable
    from mkfrag.config.logging import MkfragLogger

logger: MkfragLogger = get_logger(__name__)

KNOWN_SECTIONS: Final[frozenset[str]] = frozenset(
    {Toml.SECTION_DEVICE, Toml.SECTION_MODULES, Toml.SECTION_PRODUCT, Toml.SECTION_BOARD}
)


@dataclass(frozen=True)
class FragmentDocument:
    """Records extracted from one fragment document.

    Attributes:
        source (str | None): Path or label the document was read from.
        device_name (str | None): ``[device].name``.
        vendor (str | None): ``[device].vendor``.
        modules (ModulesMakefile | None): Modules fragment input, if ``[modules]`` exists.
        product (ProductMakefile | None): Product fragment input with the explicit
            ``copy_files`` only; see `resolve_product_makefile` for the full list.
        board (BoardMakefile | None): Board fragment input, if ``[board]`` exists.
        blobs (tuple[BlobEntry, ...]): ``[[product.blobs]]`` entries in document order.
        proprietary_dir (str | None): Directory blob sources are relative to.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading.
    """

    source: str | None = None
    device_name: str | None = None
    vendor: str | None = None
    modules: ModulesMakefile | None = None
    product: ProductMakefile | None = None
    board: BoardMakefile | None = None
    blobs: tuple[BlobEntry, ...] = ()
    proprietary_dir: str | None = None
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)


def _require_str(table: TomlTable, key: str, *, where: str, source: str | None) -> str:
    value = table.get(key)
    if value is None:
        raise DocumentError(f"missing required key {where}.{key}", source=source)
    if not isinstance(value, str):
        raise DocumentError(
            f"expected string in {where}.{key}, got {type(value).__name__}", source=source
        )
    return value


def _load_symlink(
    table: TomlTable,
    *,
    where: str,
    source: str | None,
    diagnostics: DiagnosticLog,
) -> Symlink:
    link_partition = _require_str(table, Toml.KEY_LINK_PARTITION, where=where, source=source)
    link_subpath = _require_str(table, Toml.KEY_LINK_SUBPATH, where=where, source=source)
    target_path = _require_str(table, Toml.KEY_TARGET_PATH, where=where, source=source)

    module_name = get_string_value_or_none_checked(
        table, Toml.KEY_MODULE_NAME, where=where, diagnostics=diagnostics
    )
    if module_name is None:
        module_name = SYMLINK_MODULE_PREFIX + sanitize_basename(link_subpath)
        logger.debug("Derived module name %s for %s", module_name, where)

    return Symlink(
        module_name=module_name,
        link_partition=link_partition,
        link_subpath=link_subpath,
        target_path=target_path,
    )


def _load_modules(
    table: TomlTable,
    *,
    device_name: str | None,
    vendor: str | None,
    source: str | None,
    diagnostics: DiagnosticLog,
) -> ModulesMakefile:
    where: str = Toml.SECTION_MODULES
    if device_name is None or vendor is None:
        raise DocumentError(
            f"[{Toml.SECTION_MODULES}] requires [{Toml.SECTION_DEVICE}] "
            f"{Toml.KEY_NAME} and {Toml.KEY_VENDOR}",
            source=source,
        )

    radio_files = get_str_list_or_none_checked(
        table, Toml.KEY_RADIO_FILES, where=where, diagnostics=diagnostics
    )

    symlinks: list[Symlink] = []
    seen: set[str] = set()
    link_tables = get_table_list_checked(
        table, Toml.KEY_SYMLINKS, where=where, diagnostics=diagnostics
    )
    for idx, link_table in enumerate(link_tables):
        link = _load_symlink(
            link_table,
            where=f"{where}.{Toml.KEY_SYMLINKS}[{idx}]",
            source=source,
            diagnostics=diagnostics,
        )
        if link.module_name in seen:
            logger.warning("Duplicate symlink module name %s", link.module_name)
            diagnostics.add_warning(f"Duplicate symlink module name: {link.module_name}")
        seen.add(link.module_name)
        symlinks.append(link)

    return ModulesMakefile(
        device=device_name,
        vendor=vendor,
        radio_files=tuple(radio_files) if radio_files is not None else None,
        symlinks=tuple(symlinks),
    )


def _load_props(
    table: TomlTable,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> dict[str, dict[str, str]]:
    props: dict[str, dict[str, str]] = {}
    for partition, part_table in table.items():
        part_where = f"{where}.{partition}"
        if not is_toml_table(part_table):
            logger.warning("Expected table in %s, got %r", part_where, part_table)
            diagnostics.add_warning(
                f"Expected table in {part_where}, got {type(part_table).__name__}: {part_table}"
            )
            continue

        values: dict[str, str] = {}
        for key, raw in part_table.items():
            value = get_prop_value_checked(raw, where=part_where, key=key, diagnostics=diagnostics)
            if value is not None:
                values[key] = value
        props[partition] = values
    return props


def _load_blobs(
    table: TomlTable,
    *,
    source: str | None,
    diagnostics: DiagnosticLog,
) -> tuple[BlobEntry, ...]:
    where = Toml.SECTION_PRODUCT
    blobs: list[BlobEntry] = []
    for idx, blob_table in enumerate(
        get_table_list_checked(table, Toml.KEY_BLOBS, where=where, diagnostics=diagnostics)
    ):
        blob_where = f"{where}.{Toml.KEY_BLOBS}[{idx}]"
        blobs.append(
            BlobEntry(
                partition=_require_str(
                    blob_table, Toml.KEY_PARTITION, where=blob_where, source=source
                ),
                path=_require_str(blob_table, Toml.KEY_PATH, where=blob_where, source=source),
                src_path=_require_str(
                    blob_table, Toml.KEY_SRC_PATH, where=blob_where, source=source
                ),
            )
        )
    return tuple(blobs)


def _load_product(table: TomlTable, *, diagnostics: DiagnosticLog) -> ProductMakefile:
    where: str = Toml.SECTION_PRODUCT

    def _opt_list(key: str) -> tuple[str, ...] | None:
        items = get_str_list_or_none_checked(table, key, where=where, diagnostics=diagnostics)
        return tuple(items) if items is not None else None

    props_table = get_table_or_none_checked(
        table, Toml.KEY_PROPS, where=where, diagnostics=diagnostics
    )

    return ProductMakefile(
        namespaces=_opt_list(Toml.KEY_NAMESPACES),
        copy_files=_opt_list(Toml.KEY_COPY_FILES),
        packages=_opt_list(Toml.KEY_PACKAGES),
        props=(
            _load_props(props_table, where=f"{where}.{Toml.KEY_PROPS}", diagnostics=diagnostics)
            if props_table is not None
            else None
        ),
        fingerprint=get_string_value_or_none_checked(
            table, Toml.KEY_FINGERPRINT, where=where, diagnostics=diagnostics
        ),
    )


def _load_board(table: TomlTable, *, diagnostics: DiagnosticLog) -> BoardMakefile:
    where: str = Toml.SECTION_BOARD
    partitions = get_str_list_or_none_checked(
        table, Toml.KEY_AB_OTA_PARTITIONS, where=where, diagnostics=diagnostics
    )
    return BoardMakefile(
        ab_ota_partitions=tuple(partitions) if partitions is not None else None,
        board_info=get_string_value_or_none_checked(
            table, Toml.KEY_BOARD_INFO, where=where, diagnostics=diagnostics
        ),
    )


def load_fragment_document(
    table: TomlTable,
    *,
    source: str | None = None,
    proprietary_dir: str | None = None,
) -> FragmentDocument:
    """Build fragment records from a parsed document.

    Args:
        table (TomlTable): Parsed TOML document.
        source (str | None): Label used in error messages.
        proprietary_dir (str | None): Overrides ``[product].proprietary_dir``.

    Returns:
        FragmentDocument: The extracted records and collected diagnostics.

    Raises:
        DocumentError: If a required key is missing or has the wrong type.
    """
    diagnostics = DiagnosticLog()

    for key in table:
        if key not in KNOWN_SECTIONS:
            logger.warning("Unknown top-level key %s in %s", key, source or "<document>")
            diagnostics.add_warning(f"Unknown top-level key ignored: {key}")

    device_table = get_table_or_none_checked(
        table, Toml.SECTION_DEVICE, where="", diagnostics=diagnostics
    )
    device_name: str | None = None
    vendor: str | None = None
    if device_table is not None:
        device_name = get_string_value_or_none_checked(
            device_table, Toml.KEY_NAME, where=Toml.SECTION_DEVICE, diagnostics=diagnostics
        )
        vendor = get_string_value_or_none_checked(
            device_table, Toml.KEY_VENDOR, where=Toml.SECTION_DEVICE, diagnostics=diagnostics
        )

    modules: ModulesMakefile | None = None
    modules_table = get_table_or_none_checked(
        table, Toml.SECTION_MODULES, where="", diagnostics=diagnostics
    )
    if modules_table is not None:
        modules = _load_modules(
            modules_table,
            device_name=device_name,
            vendor=vendor,
            source=source,
            diagnostics=diagnostics,
        )

    product: ProductMakefile | None = None
    blobs: tuple[BlobEntry, ...] = ()
    product_table = get_table_or_none_checked(
        table, Toml.SECTION_PRODUCT, where="", diagnostics=diagnostics
    )
    if product_table is not None:
        product = _load_product(product_table, diagnostics=diagnostics)
        blobs = _load_blobs(product_table, source=source, diagnostics=diagnostics)
        if proprietary_dir is None:
            proprietary_dir = get_string_value_or_none_checked(
                product_table,
                Toml.KEY_PROPRIETARY_DIR,
                where=Toml.SECTION_PRODUCT,
                diagnostics=diagnostics,
            )

    board: BoardMakefile | None = None
    board_table = get_table_or_none_checked(
        table, Toml.SECTION_BOARD, where="", diagnostics=diagnostics
    )
    if board_table is not None:
        board = _load_board(board_table, diagnostics=diagnostics)

    logger.debug(
        "Loaded %s: modules=%s product=%s board=%s blobs=%d diagnostics=%d",
        source or "<document>",
        modules is not None,
        product is not None,
        board is not None,
        len(blobs),
        len(diagnostics),
    )
    return FragmentDocument(
        source=source,
        device_name=device_name,
        vendor=vendor,
        modules=modules,
        product=product,
        board=board,
        blobs=blobs,
        proprietary_dir=proprietary_dir,
        diagnostics=tuple(diagnostics),
    )


def blob_copy_files(doc: FragmentDocument) -> list[str]:
    """Return one ``PRODUCT_COPY_FILES`` descriptor per blob, in document order.

    Raises:
        DocumentError: If blobs are present but no proprietary directory is known.
    """
    if not doc.blobs:
        return []
    if doc.proprietary_dir is None:
        raise DocumentError(
            f"[[{Toml.SECTION_PRODUCT}.{Toml.KEY_BLOBS}]] requires "
            f"{Toml.SECTION_PRODUCT}.{Toml.KEY_PROPRIETARY_DIR}",
            source=doc.source,
        )
    proprietary_dir: str = doc.proprietary_dir
    return [blob_to_file_copy(blob, proprietary_dir) for blob in doc.blobs]


def resolve_product_makefile(doc: FragmentDocument) -> ProductMakefile | None:
    """Return the product record with blob descriptors appended to ``copy_files``.

    Explicit ``copy_files`` come first, followed by the blob descriptors. Without
    blobs the record is returned unchanged.
    """
    if doc.product is None:
        return None
    blob_files = blob_copy_files(doc)
    if not blob_files:
        return doc.product
    return replace(doc.product, copy_files=(*(doc.product.copy_files or ()), *blob_files))
