"""Evaluator orchestrating one birth date query."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING

from vaxband.config.settings import Settings
from vaxband.core.age import compute_age, parse_birth_date
from vaxband.core.bands import classify_band
from vaxband.core.labs import recommend_labs
from vaxband.core.models import Evaluation
from vaxband.core.vaccines import classify_vaccines
from vaxband.storage.table import default_table, load_reference_table


if TYPE_CHECKING:
    from vaxband.core.models import ReferenceTable

logger = logging.getLogger(__name__)


class Evaluator:
    """Computes age, band, vaccine groups and labs for a birth date.

    The reference table is loaded once and shared by every evaluation.
    """

    def __init__(
        self, settings: Settings | None = None, table: ReferenceTable | None = None
    ) -> None:
        if settings is None:
            settings = Settings()
        self.settings = settings
        if table is None and settings.table.path:
            table = load_reference_table(settings=settings)
        self.table = table if table is not None else default_table()

    def evaluate(
        self, birth_date: str | date | datetime, reference: date | datetime | None = None
    ) -> Evaluation:
        """Run a full evaluation.

        Args:
            birth_date: Birth date as ``YYYY-MM-DD``.
            reference: Day treated as today. Defaults to the current local date.

        Returns:
            The evaluation. Invalid or future birth dates give an evaluation
            with no age, band, vaccines or labs.
        """
        if reference is None:
            reference = datetime.now()
        reference_day = reference.date() if isinstance(reference, datetime) else reference
        born = parse_birth_date(birth_date)
        birth_text = born.isoformat() if born else str(birth_date)

        age = compute_age(birth_date, reference_day)
        if age is None:
            logger.info("Invalid birth date %r for reference %s", birth_text, reference_day)
            return Evaluation(birth_date=birth_text, reference_date=reference_day)

        band = classify_band(age)
        labs = recommend_labs(age)
        if band is None:
            return Evaluation(
                birth_date=birth_text, reference_date=reference_day, age=age, labs=labs
            )

        vaccines = classify_vaccines(band, self.table.records)
        logger.debug(
            "Evaluated %s: age %s, band %s, %d labs", birth_text, age.label, band.value, len(labs)
        )
        return Evaluation(
            birth_date=birth_text,
            reference_date=reference_day,
            age=age,
            band=band,
            vaccines=vaccines,
            labs=labs,
        )
