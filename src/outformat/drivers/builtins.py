# topmark:header:start
#
#   project      : OutFormat
#   file         : builtins.py
#   file_relpath : src/outformat/drivers/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in driver catalog.

The catalog lists common raster and vector drivers in registration order.
Order matters: it is the default tie-break when several drivers match a
destination. It reproduces the historical orderings the resolver's fixed
overrides exist for (``GTiff`` before ``COG`` for ``.tif``, ``GMT`` before
``netCDF`` for ``.nc``).
"""

from __future__ import annotations

from outformat.drivers.base import Capability, Driver, DriverCapabilities

C = Capability

_RASTER_CREATE = DriverCapabilities.of(C.CAN_CREATE, C.CAN_CREATE_COPY, C.IS_RASTER)
_RASTER_COPY = DriverCapabilities.of(C.CAN_CREATE_COPY, C.IS_RASTER)
_VECTOR_CREATE = DriverCapabilities.of(C.CAN_CREATE, C.IS_VECTOR)
_HYBRID_CREATE = DriverCapabilities.of(C.CAN_CREATE, C.CAN_CREATE_COPY, C.IS_RASTER, C.IS_VECTOR)

DRIVERS: list[Driver] = [
    Driver("VRT", _RASTER_CREATE, frozenset({"vrt"}), description="Virtual Raster"),
    Driver("GTiff", _RASTER_CREATE, frozenset({"tif", "tiff"}), description="GeoTIFF"),
    Driver(
        "COG",
        _RASTER_COPY,
        frozenset({"tif", "tiff"}),
        description="Cloud optimized GeoTIFF generator",
    ),
    Driver(
        "NITF",
        _RASTER_CREATE,
        frozenset({"ntf"}),
        description="National Imagery Transmission Format",
    ),
    Driver("HFA", _RASTER_CREATE, frozenset({"img"}), description="Erdas Imagine Images (.img)"),
    Driver("AAIGrid", _RASTER_COPY, frozenset({"asc"}), description="Arc/Info ASCII Grid"),
    Driver("PNG", _RASTER_COPY, frozenset({"png"}), description="Portable Network Graphics"),
    Driver("JPEG", _RASTER_COPY, frozenset({"jpg", "jpeg"}), description="JPEG JFIF"),
    Driver("GIF", _RASTER_COPY, frozenset({"gif"}), description="Graphics Interchange Format"),
    Driver("WEBP", _RASTER_COPY, frozenset({"webp"}), description="WEBP"),
    Driver("JP2OpenJPEG", _RASTER_COPY, frozenset({"jp2", "j2k"}), description="JPEG-2000"),
    Driver(
        "GMT",
        _RASTER_COPY,
        frozenset({"nc"}),
        description="GMT NetCDF Grid Format",
    ),
    Driver(
        "netCDF",
        _HYBRID_CREATE,
        frozenset({"nc"}),
        description="Network Common Data Format",
    ),
    Driver("GRIB", _RASTER_COPY, frozenset({"grb", "grb2", "grib2"}), description="GRIdded Binary"),
    Driver("GS7BG", _RASTER_CREATE, frozenset({"grd"}), description="Golden Software 7 Binary"),
    Driver("GSAG", _RASTER_COPY, frozenset({"grd"}), description="Golden Software ASCII Grid"),
    Driver("GSBG", _RASTER_CREATE, frozenset({"grd"}), description="Golden Software Binary Grid"),
    Driver("PCIDSK", _HYBRID_CREATE, frozenset({"pix"}), description="PCIDSK Database File"),
    Driver("PDF", _HYBRID_CREATE, frozenset({"pdf"}), description="Geospatial PDF"),
    Driver("MBTiles", _HYBRID_CREATE, frozenset({"mbtiles"}), description="MBTiles"),
    Driver(
        "KMLSUPEROVERLAY",
        _RASTER_COPY,
        frozenset({"kml", "kmz"}),
        description="Kml Super Overlay",
    ),
    Driver(
        "PostGISRaster",
        _RASTER_COPY,
        connection_prefix="PG:",
        description="PostGIS Raster driver",
    ),
    Driver("Zarr", _RASTER_CREATE, frozenset({"zarr"}), description="Zarr"),
    Driver(
        "ESRI Shapefile",
        _VECTOR_CREATE,
        frozenset({"shp", "dbf", "shz", "shp.zip"}),
        description="ESRI Shapefile",
    ),
    Driver("KML", _VECTOR_CREATE, frozenset({"kml"}), description="Keyhole Markup Language (KML)"),
    Driver(
        "LIBKML",
        _VECTOR_CREATE,
        frozenset({"kml", "kmz"}),
        description="Keyhole Markup Language (LIBKML)",
    ),
    Driver(
        "CSV",
        _VECTOR_CREATE,
        frozenset({"csv", "tsv", "psv"}),
        description="Comma Separated Value (.csv)",
    ),
    Driver("GeoJSON", _VECTOR_CREATE, frozenset({"json", "geojson"}), description="GeoJSON"),
    Driver("FlatGeobuf", _VECTOR_CREATE, frozenset({"fgb"}), description="FlatGeobuf"),
    Driver(
        "GPKG",
        _HYBRID_CREATE,
        frozenset({"gpkg", "gpkg.zip"}),
        description="GeoPackage",
    ),
    Driver(
        "PostgreSQL",
        _VECTOR_CREATE,
        connection_prefix="PG:",
        description="PostgreSQL/PostGIS",
    ),
    Driver("Parquet", _VECTOR_CREATE, frozenset({"parquet"}), description="(Geo)Parquet"),
    Driver(
        "PMTiles",
        DriverCapabilities.of(C.IS_VECTOR, C.SUPPORTS_VECTOR_TRANSLATE_FROM),
        frozenset({"pmtiles"}),
        description="ProtoMap Tiles",
    ),
]
