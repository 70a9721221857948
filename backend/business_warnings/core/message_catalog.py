"""Message Catalog - centralized locale-specific dialog text.

Invariants:
    - All strings are pure data (no IO, no computation beyond lookup)
    - Covers every Locale in the Locale enum
    - Each locale covers every key required_translation_keys() reports
    - Absent keys raise MissingTranslationError, never fall back to another locale

Design Decisions:
    - Keys are logical identifiers shared with the web client's i18n bundles
      (label.*, title.dialog.*, text.dialog.*)
    - No cross-locale fallback: an English sentence inside a French dialog is
      treated as a catalog defect, caught by test_message_catalog
"""

from business_warnings.core.domain_types import Locale
from business_warnings.core.errors import MissingTranslationError


MESSAGES: dict[Locale, dict[str, str]] = {
    Locale.EN_CA: {
        # --- Buttons ---
        "label.general.ok": "OK",
        "label.general.close": "Close",
        "label.dialog.contactRegistry": "Contact BC Registries",
        "label.dialog.updateBusinessInfo": "Update Business Information",
        "label.dialog.viewAmalgamation": "View Amalgamation",
        "label.dialog.fileAnnualReport": "File Annual Report",
        # --- Operational failures ---
        "title.dialog.error.download": "Unable to Download Document",
        "text.dialog.error.download": (
            "We were unable to download your document. If this error "
            "continues, please contact us."
        ),
        # --- Warnings ---
        "title.dialog.warning.involuntaryDissolution": (
            "This Business is in the Process of Being Dissolved"
        ),
        "text.dialog.warning.involuntaryDissolution": (
            "The Registrar has started to dissolve this business for failing to "
            "meet its filing obligations. Contact BC Registries to stop the "
            "dissolution."
        ),
        "title.dialog.warning.notInGoodStanding": "Business Not in Good Standing",
        "text.dialog.warning.notInGoodStanding": (
            "This business is not in good standing. Some filings are unavailable "
            "until the business returns to good standing."
        ),
        "title.dialog.warning.missingRequiredBusinessInfo": (
            "Missing Required Business Information"
        ),
        "text.dialog.warning.missingRequiredBusinessInfo": (
            "Some information the Registry requires for this business is missing. "
            "Update the business information to continue filing."
        ),
        "title.dialog.warning.futureEffectiveAmalgamation": (
            "Future Effective Amalgamation"
        ),
        "text.dialog.warning.futureEffectiveAmalgamation": (
            "This business is part of an amalgamation that has not yet taken "
            "effect. Filings are limited until the effective date."
        ),
        "title.dialog.warning.compliance": "Filing Required",
        "text.dialog.warning.compliance": (
            "This business has an outstanding annual report. File it to keep the "
            "business in good standing."
        ),
    },
    Locale.FR_CA: {
        # --- Boutons ---
        "label.general.ok": "OK",
        "label.general.close": "Fermer",
        "label.dialog.contactRegistry": "Communiquer avec BC Registries",
        "label.dialog.updateBusinessInfo": "Mettre à jour les renseignements",
        "label.dialog.viewAmalgamation": "Voir la fusion",
        "label.dialog.fileAnnualReport": "Déposer le rapport annuel",
        # --- Échecs d'opération ---
        "title.dialog.error.download": "Impossible de télécharger le document",
        "text.dialog.error.download": (
            "Nous n'avons pas pu télécharger votre document. Si l'erreur "
            "persiste, veuillez communiquer avec nous."
        ),
        # --- Avertissements ---
        "title.dialog.warning.involuntaryDissolution": (
            "Cette entreprise est en voie de dissolution"
        ),
        "text.dialog.warning.involuntaryDissolution": (
            "Le registraire a entamé la dissolution de cette entreprise pour "
            "défaut de dépôt. Communiquez avec BC Registries pour arrêter la "
            "dissolution."
        ),
        "title.dialog.warning.notInGoodStanding": (
            "Entreprise non en règle"
        ),
        "text.dialog.warning.notInGoodStanding": (
            "Cette entreprise n'est pas en règle. Certains dépôts sont "
            "indisponibles jusqu'à ce qu'elle soit de nouveau en règle."
        ),
        "title.dialog.warning.missingRequiredBusinessInfo": (
            "Renseignements obligatoires manquants"
        ),
        "text.dialog.warning.missingRequiredBusinessInfo": (
            "Des renseignements exigés par le registre sont manquants. Mettez à "
            "jour les renseignements de l'entreprise pour continuer."
        ),
        "title.dialog.warning.futureEffectiveAmalgamation": (
            "Fusion à date d'effet future"
        ),
        "text.dialog.warning.futureEffectiveAmalgamation": (
            "Cette entreprise fait partie d'une fusion qui n'a pas encore pris "
            "effet. Les dépôts sont limités jusqu'à la date d'effet."
        ),
        "title.dialog.warning.compliance": "Dépôt requis",
        "text.dialog.warning.compliance": (
            "Cette entreprise a un rapport annuel en souffrance. Déposez-le pour "
            "que l'entreprise demeure en règle."
        ),
    },
}


def get_message(
    locale: Locale, key: str, catalog: dict[Locale, dict[str, str]] = MESSAGES,
) -> str:
    """Text for key in locale. Raises MissingTranslationError when absent."""
    text = catalog.get(locale, {}).get(key)
    if not text:
        raise MissingTranslationError(key, locale.value)
    return text


def missing_keys(
    locale: Locale,
    keys: frozenset[str] | set[str],
    catalog: dict[Locale, dict[str, str]] = MESSAGES,
) -> list[str]:
    """Keys absent (or empty) in locale, sorted."""
    messages = catalog.get(locale, {})
    return sorted(k for k in keys if not messages.get(k))
