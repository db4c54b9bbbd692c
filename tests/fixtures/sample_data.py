# Path: tests/fixtures/sample_data.py
"""
Sample Data Generators for Testing

Builders for taxonomy schemas, instance documents, inline XBRL pages
and ZIP archives used across the test suite.
"""

import io
import zipfile
from pathlib import Path
from typing import Optional


# ==============================================================================
# NAMESPACES
# ==============================================================================

XSD_NS = 'http://www.w3.org/2001/XMLSchema'
XBRLI_NS = 'http://www.xbrl.org/2003/instance'
XBRLDI_NS = 'http://xbrl.org/2006/xbrldi'
LINK_NS = 'http://www.xbrl.org/2003/linkbase'
XLINK_NS = 'http://www.w3.org/1999/xlink'
XSI_NS = 'http://www.w3.org/2001/XMLSchema-instance'
IX_NS = 'http://www.xbrl.org/2013/inlineXBRL'

IDX_COR_NS = 'http://www.idx.co.id/xbrl/taxonomy/2024/cor'
IDX_DIM_NS = 'http://www.idx.co.id/xbrl/taxonomy/2024/dim'
IDX_EXT_NS = 'http://www.example.co.id/xbrl/ext'

SCHEME_IDX = 'http://www.idx.co.id'


# ==============================================================================
# TAXONOMY SCHEMAS
# ==============================================================================

def create_schema(
    target_namespace: str = IDX_COR_NS,
    prefix: str = 'idx-cor',
    elements: Optional[list[dict]] = None,
    imports: Optional[list[tuple[str, str, Optional[str]]]] = None,
    linkbase_refs: Optional[list[dict]] = None,
    role_refs: Optional[list[tuple[str, str]]] = None,
) -> bytes:
    """
    Create a taxonomy schema document.

    Args:
        target_namespace: targetNamespace of the schema
        prefix: Prefix bound to the target namespace
        elements: Attribute dicts for top-level xs:element declarations;
            a 'documentation' key becomes xs:annotation/xs:documentation
        imports: (kind, schemaLocation, namespace) directives
        linkbase_refs: Attribute dicts for link:linkbaseRef (href, role, arcrole)
        role_refs: (roleURI, href) pairs

    Returns:
        Schema bytes
    """
    parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<xs:schema xmlns:xs="{XSD_NS}" xmlns:xbrli="{XBRLI_NS}" '
        f'xmlns:link="{LINK_NS}" xmlns:xlink="{XLINK_NS}" '
        f'xmlns:{prefix}="{target_namespace}" '
        f'targetNamespace="{target_namespace}" elementFormDefault="qualified">',
    ]

    if linkbase_refs or role_refs:
        parts.append('<xs:annotation><xs:appinfo>')
        for ref in linkbase_refs or []:
            parts.append(
                f'<link:linkbaseRef xlink:type="simple" xlink:href="{ref["href"]}" '
                f'xlink:role="{ref.get("role", "")}" '
                f'xlink:arcrole="{ref.get("arcrole", "http://www.w3.org/1999/xlink/properties/linkbase")}"/>'
            )
        for role_uri, href in role_refs or []:
            parts.append(
                f'<link:roleRef roleURI="{role_uri}" xlink:type="simple" xlink:href="{href}"/>'
            )
        parts.append('</xs:appinfo></xs:annotation>')

    for kind, location, namespace in imports or []:
        namespace_attr = f' namespace="{namespace}"' if namespace else ''
        parts.append(f'<xs:{kind}{namespace_attr} schemaLocation="{location}"/>')

    for element in elements or []:
        attrs = dict(element)
        documentation = attrs.pop('documentation', None)
        rendered = ' '.join(f'{key}="{value}"' for key, value in attrs.items())
        if documentation:
            parts.append(
                f'<xs:element {rendered}><xs:annotation>'
                f'<xs:documentation>{documentation}</xs:documentation>'
                f'</xs:annotation></xs:element>'
            )
        else:
            parts.append(f'<xs:element {rendered}/>')

    parts.append('</xs:schema>')
    return '\n'.join(parts).encode('utf-8')


def create_core_elements() -> list[dict]:
    """Concept declarations used by the sample instance."""
    return [
        {
            'name': 'Revenue',
            'id': 'idx-cor_Revenue',
            'type': 'xbrli:monetaryItemType',
            'substitutionGroup': 'xbrli:item',
            'xbrli:periodType': 'duration',
            'xbrli:balance': 'credit',
            'nillable': 'true',
            'documentation': 'Pendapatan usaha',
        },
        {
            'name': 'Assets',
            'id': 'idx-cor_Assets',
            'type': 'xbrli:monetaryItemType',
            'substitutionGroup': 'xbrli:item',
            'xbrli:periodType': 'instant',
            'xbrli:balance': 'debit',
        },
        {
            'name': 'EarningsPerShare',
            'id': 'idx-cor_EarningsPerShare',
            'type': 'xbrli:decimalItemType',
            'substitutionGroup': 'xbrli:item',
            'xbrli:periodType': 'duration',
            'nillable': 'false',
        },
        {
            'name': 'StatementAbstract',
            'id': 'idx-cor_StatementAbstract',
            'type': 'xbrli:stringItemType',
            'substitutionGroup': 'xbrli:item',
            'xbrli:periodType': 'duration',
            'abstract': 'true',
        },
    ]


def write_circular_taxonomy(base_dir: Path) -> Path:
    """
    Write Taxonomy.xsd -> core.xsd -> dim.xsd -> core.xsd (cycle).

    Returns:
        Path of the entry schema
    """
    base_dir.mkdir(parents=True, exist_ok=True)

    (base_dir / 'Taxonomy.xsd').write_bytes(create_schema(
        target_namespace='http://www.idx.co.id/xbrl/entry',
        prefix='idx-entry',
        imports=[('import', 'core.xsd', IDX_COR_NS)],
        role_refs=[('http://www.idx.co.id/role/BalanceSheet', 'core.xsd#BalanceSheet')],
    ))
    (base_dir / 'core.xsd').write_bytes(create_schema(
        elements=create_core_elements(),
        imports=[('import', 'dim.xsd', IDX_DIM_NS)],
        linkbase_refs=[{
            'href': 'core-lab.xml',
            'role': 'http://www.xbrl.org/2003/role/labelLinkbaseRef',
        }],
    ))
    (base_dir / 'dim.xsd').write_bytes(create_schema(
        target_namespace=IDX_DIM_NS,
        prefix='idx-dim',
        elements=[{
            'name': 'SegmentAxis',
            'type': 'xbrli:stringItemType',
            'substitutionGroup': 'xbrldt:dimensionItem',
            'abstract': 'true',
            'xbrli:periodType': 'duration',
        }],
        imports=[('import', './core.xsd', IDX_COR_NS)],
    ))

    return base_dir / 'Taxonomy.xsd'


# ==============================================================================
# INSTANCE DOCUMENTS
# ==============================================================================

def create_instance() -> bytes:
    """
    Create a classic instance document.

    Contents:
        contexts: FY2024 (duration, explicit segment member),
                  AsOf2024 (instant, typed scenario member),
                  Forever (no period children)
        units: IDR (simple), IDRPerShare (divide)
        facts: Revenue, Assets, EarningsPerShare, nil Assets,
               idx-ext:CustomItem (not in the taxonomy), formatted Revenue
    """
    return f'''<?xml version="1.0" encoding="UTF-8"?>
<xbrli:xbrl xmlns:xbrli="{XBRLI_NS}" xmlns:link="{LINK_NS}" xmlns:xlink="{XLINK_NS}"
            xmlns:xsi="{XSI_NS}" xmlns:xbrldi="{XBRLDI_NS}"
            xmlns:iso4217="http://www.xbrl.org/2003/iso4217"
            xmlns:idx-cor="{IDX_COR_NS}" xmlns:idx-dim="{IDX_DIM_NS}"
            xmlns:idx-ext="{IDX_EXT_NS}">
  <link:schemaRef xlink:type="simple" xlink:href="Taxonomy.xsd"/>
  <xbrli:context id="FY2024">
    <xbrli:entity>
      <xbrli:identifier scheme="{SCHEME_IDX}">BBCA</xbrli:identifier>
      <xbrli:segment>
        <xbrldi:explicitMember dimension="idx-dim:SegmentAxis">idx-dim:BankingMember</xbrldi:explicitMember>
      </xbrli:segment>
    </xbrli:entity>
    <xbrli:period>
      <xbrli:startDate>2024-01-01</xbrli:startDate>
      <xbrli:endDate>2024-12-31</xbrli:endDate>
    </xbrli:period>
  </xbrli:context>
  <xbrli:context id="AsOf2024">
    <xbrli:entity>
      <xbrli:identifier scheme="{SCHEME_IDX}">BBCA</xbrli:identifier>
    </xbrli:entity>
    <xbrli:period>
      <xbrli:instant>2024-12-31</xbrli:instant>
    </xbrli:period>
    <xbrli:scenario>
      <xbrldi:typedMember dimension="idx-dim:BranchAxis"><idx-dim:BranchCode>JKT-01</idx-dim:BranchCode></xbrldi:typedMember>
    </xbrli:scenario>
  </xbrli:context>
  <xbrli:context id="Forever">
    <xbrli:entity>
      <xbrli:identifier scheme="{SCHEME_IDX}">BBCA</xbrli:identifier>
    </xbrli:entity>
    <xbrli:period>
      <xbrli:forever/>
    </xbrli:period>
  </xbrli:context>
  <xbrli:unit id="IDR">
    <xbrli:measure>iso4217:IDR</xbrli:measure>
  </xbrli:unit>
  <xbrli:unit id="IDRPerShare">
    <xbrli:divide>
      <xbrli:unitNumerator><xbrli:measure>iso4217:IDR</xbrli:measure></xbrli:unitNumerator>
      <xbrli:unitDenominator><xbrli:measure>xbrli:shares</xbrli:measure></xbrli:unitDenominator>
    </xbrli:divide>
  </xbrli:unit>
  <idx-cor:Revenue contextRef="FY2024" unitRef="IDR" decimals="0" id="f1">1000000</idx-cor:Revenue>
  <idx-cor:Assets contextRef="AsOf2024" unitRef="IDR" decimals="-3">2500000.50</idx-cor:Assets>
  <idx-cor:EarningsPerShare contextRef="FY2024" unitRef="IDRPerShare" decimals="2">125.75</idx-cor:EarningsPerShare>
  <idx-cor:Assets contextRef="Forever" unitRef="IDR" xsi:nil="true"/>
  <idx-ext:CustomItem contextRef="FY2024" xml:lang="id">Catatan khusus</idx-ext:CustomItem>
  <idx-cor:Revenue contextRef="FY2024" unitRef="IDR" decimals="0">1,000,000</idx-cor:Revenue>
</xbrli:xbrl>
'''.encode('utf-8')


# ==============================================================================
# INLINE XBRL PAGES
# ==============================================================================

def create_inline_xhtml(facts: Optional[list[dict]] = None) -> bytes:
    """
    Create a well-formed inline XBRL page.

    Args:
        facts: Dicts with 'name', 'value' and optional 'unitRef',
            'decimals', 'tag' (default nonFraction)

    Returns:
        XHTML bytes
    """
    if facts is None:
        facts = [
            {'name': 'idx-cor:Revenue', 'value': '1.234.567', 'unitRef': 'IDR', 'decimals': '0'},
            {'name': 'idx-cor:NetIncome', 'value': '(45.678,90)', 'unitRef': 'IDR', 'decimals': '2'},
        ]

    rows = []
    for fact in facts:
        tag = fact.get('tag', 'nonFraction')
        attrs = [f'name="{fact["name"]}"']
        if 'unitRef' in fact:
            attrs.append(f'unitRef="{fact["unitRef"]}"')
        if 'decimals' in fact:
            attrs.append(f'decimals="{fact["decimals"]}"')
        rows.append(
            f'<tr><td><ix:{tag} {" ".join(attrs)}>{fact["value"]}</ix:{tag}></td></tr>'
        )

    return f'''<?xml version="1.0" encoding="UTF-8"?>
<html xmlns="http://www.w3.org/1999/xhtml" xmlns:ix="{IX_NS}">
  <head><title>Laporan Keuangan</title></head>
  <body>
    <table>
      {"".join(rows)}
    </table>
  </body>
</html>
'''.encode('utf-8')


def create_inline_html() -> bytes:
    """
    Create a malformed inline page that only the HTML parser accepts.

    Tag and attribute names are upper case; the HTML parser folds them.
    """
    return b'''<html>
<head><title>Laporan</title></head>
<body>
<p>Ringkasan<br>
<IX:NONFRACTION NAME="idx-cor:Assets" UNITREF="USD" DECIMALS="-3">1,234.56</IX:NONFRACTION>
<ix:nonNumeric name="idx-cor:Cash">&nbsp;12 345</ix:nonNumeric>
<ix:nonFraction name="idx-cor:Empty"></ix:nonFraction>
<ix:nonFraction name="">500</ix:nonFraction>
<ix:nonFraction name="idx-cor:Note">lihat catatan</ix:nonFraction>
</body>
</html>
'''


def create_flat_instance() -> bytes:
    """Instance document read by the archive extractor as flat facts."""
    return f'''<?xml version="1.0" encoding="UTF-8"?>
<xbrli:xbrl xmlns:xbrli="{XBRLI_NS}" xmlns:link="{LINK_NS}" xmlns:xlink="{XLINK_NS}"
            xmlns:xsi="{XSI_NS}" xmlns:idx-cor="{IDX_COR_NS}">
  <link:schemaRef xlink:type="simple" xlink:href="Taxonomy.xsd"/>
  <xbrli:context id="c1">
    <xbrli:entity><xbrli:identifier scheme="{SCHEME_IDX}">TLKM</xbrli:identifier></xbrli:entity>
    <xbrli:period><xbrli:instant>2024-03-31</xbrli:instant></xbrli:period>
  </xbrli:context>
  <xbrli:unit id="IDR"><xbrli:measure>iso4217:IDR</xbrli:measure></xbrli:unit>
  <idx-cor:Cash contextRef="c1" unitRef="IDR" decimals="0">5000000</idx-cor:Cash>
  <idx-cor:Equity contextRef="c1" decimals="INF">750.5</idx-cor:Equity>
  <idx-cor:Goodwill contextRef="c1" unitRef="IDR" xsi:nil="true"/>
  <idx-cor:Description contextRef="c1">bukan angka</idx-cor:Description>
</xbrli:xbrl>
'''.encode('utf-8')


# ==============================================================================
# ARCHIVES
# ==============================================================================

def create_zip(members: dict[str, bytes]) -> bytes:
    """
    Create a ZIP archive in memory.

    Args:
        members: Member name -> content, written in insertion order

    Returns:
        Archive bytes
    """
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as archive:
        for name, content in members.items():
            archive.writestr(name, content)
    return buffer.getvalue()


def write_zip(path: Path, members: dict[str, bytes]) -> Path:
    """Write a ZIP archive to path and return it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(create_zip(members))
    return path


def create_inline_archive() -> bytes:
    """Archive with one XHTML page, one flat instance and an ignored member."""
    return create_zip({
        'reports/page1.xhtml': create_inline_xhtml(),
        'reports/instance.xbrl': create_flat_instance(),
        'reports/readme.txt': b'Bukan dokumen XBRL',
    })


def create_xbrl_archive(include_taxonomy: bool = True) -> bytes:
    """
    Archive for the standalone importer.

    Holds filing/INSTANCE.XBRL plus, when requested, filing/Taxonomy.xsd
    and the core/dim schemas it imports.
    """
    members = {'filing/INSTANCE.XBRL': create_instance()}
    if include_taxonomy:
        members['filing/Taxonomy.xsd'] = create_schema(
            target_namespace='http://www.idx.co.id/xbrl/entry',
            prefix='idx-entry',
            imports=[('import', 'core.xsd', IDX_COR_NS)],
            role_refs=[('http://www.idx.co.id/role/BalanceSheet', 'core.xsd#BalanceSheet')],
        )
        members['filing/core.xsd'] = create_schema(
            elements=create_core_elements(),
            imports=[('import', 'dim.xsd', IDX_DIM_NS)],
            linkbase_refs=[{
                'href': 'core-lab.xml',
                'role': 'http://www.xbrl.org/2003/role/labelLinkbaseRef',
            }],
        )
        members['filing/dim.xsd'] = create_schema(
            target_namespace=IDX_DIM_NS,
            prefix='idx-dim',
            elements=[{
                'name': 'SegmentAxis',
                'type': 'xbrli:stringItemType',
                'substitutionGroup': 'xbrldt:dimensionItem',
                'abstract': 'true',
                'xbrli:periodType': 'duration',
            }],
            imports=[('import', 'core.xsd', IDX_COR_NS)],
        )
    return create_zip(members)
