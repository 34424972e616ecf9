from app.upload.models import FileCategory

IMAGE_MARKERS: tuple[str, ...] = (".jpg", ".png")
PDF_MARKERS: tuple[str, ...] = (".pdf",)


def classify(file_name: str) -> FileCategory:
    """Classify a file by case-insensitive substring match on its name.

    Image markers win over PDF markers, so ``scan.png.pdf`` is an image.
    A marker anywhere in the name counts: ``report.pdfold`` is a PDF.
    """
    lowered = file_name.lower()
    if any(marker in lowered for marker in IMAGE_MARKERS):
        return FileCategory.IMAGE
    if any(marker in lowered for marker in PDF_MARKERS):
        return FileCategory.PDF_DOCUMENT
    return FileCategory.GENERIC
