"""Export the current product view to CSV."""
import csv
import io
import logging
from datetime import date

from catalog.models import Product

logger = logging.getLogger(__name__)

HEADERS = ["ID", "Title", "Price", "Description", "Category", "Images"]
BOM = "\ufeff"


def export_csv(products: list[Product]) -> bytes:
    """Serialize *products* to UTF-8 CSV bytes prefixed with a byte-order mark.

    ID and price are written bare; every text column is double-quoted with
    embedded quotes doubled. Images are joined with ", " into one field.
    """
    buffer = io.StringIO()
    buffer.write(",".join(HEADERS) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for p in products:
        writer.writerow([
            p.id,
            p.title or "",
            p.price,
            p.description or "",
            p.category_name or "",
            ", ".join(p.images),
        ])
    logger.info("Exported %d products to CSV", len(products))
    return (BOM + buffer.getvalue()).encode("utf-8")


def export_filename(today: date | None = None) -> str:
    """Return the download name, e.g. ``products_2024-05-01.csv``."""
    today = today or date.today()
    return f"products_{today.isoformat()}.csv"
