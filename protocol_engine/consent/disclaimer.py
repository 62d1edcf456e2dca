"""
Medical Disclaimer Content

Per-family disclaimers shown while consent is pending, the general
screening questions, and helpers checking a consent record for
completeness.
"""

from typing import Iterable, List, Optional

from ..catalog.ailments import AILMENT_CATALOG, AilmentCatalog
from ..session.models import MedicalConsent, ProtocolFamily
from .models import AilmentDisclaimer, ProtocolDisclaimer, ScreeningQuestion

PROTOCOL_DISCLAIMERS = {
    ProtocolFamily.LONGEVITY: ProtocolDisclaimer(
        family=ProtocolFamily.LONGEVITY,
        title="Longevity Protocol Medical Disclaimer",
        risks=[
            "Intermittent fasting may cause fatigue, dizziness, or mood changes",
            "Calorie restriction can lead to nutritional deficiencies if not properly managed",
            "May interact with diabetes medications or blood pressure medications",
            "Not suitable for individuals with eating disorders or history of disordered eating",
            "May affect energy levels and physical performance",
        ],
        contraindications=[
            "Pregnancy or breastfeeding",
            "Type 1 diabetes",
            "History of eating disorders",
            "Underweight (BMI < 18.5)",
            "Taking medications that require food",
            "Chronic kidney or liver disease",
        ],
        requirements=[
            "Consultation with healthcare provider before starting",
            "Regular monitoring of energy levels and well-being",
            "Gradual implementation of fasting protocols",
            "Adequate nutrient intake during eating windows",
        ],
    ),
    ProtocolFamily.CLEANSE: ProtocolDisclaimer(
        family=ProtocolFamily.CLEANSE,
        title="Parasite Cleanse Protocol Medical Disclaimer",
        risks=[
            "Herbal supplements may cause digestive upset or allergic reactions",
            "Detox reactions may include fatigue, headaches, or skin changes",
            "May interact with medications or exacerbate certain conditions",
            "Intensive protocols can cause significant digestive disturbance",
            "Possible Herxheimer reaction (temporary symptom worsening)",
        ],
        contraindications=[
            "Pregnancy or breastfeeding",
            "Inflammatory bowel disease (IBD)",
            "Severe digestive disorders",
            "Immunocompromised conditions",
            "Taking blood thinners or immunosuppressants",
            "Recent surgery or serious illness",
        ],
        requirements=[
            "Healthcare provider supervision, especially for intensive protocols",
            "Gradual introduction of cleansing foods and herbs",
            "Monitoring for adverse reactions",
            "Adequate hydration and electrolyte balance",
            "Stop immediately if severe symptoms occur",
        ],
    ),
}

GENERAL_SCREENING_QUESTIONS = [
    ScreeningQuestion(
        key="pregnancy_screening_complete",
        label="Pregnancy/Nursing Status",
        description="I confirm that I am not pregnant, planning to become pregnant, or nursing",
    ),
    ScreeningQuestion(
        key="medical_conditions_screened",
        label="Medical Conditions",
        description="I have disclosed all medical conditions and consulted my healthcare provider",
    ),
    ScreeningQuestion(
        key="over_18_years",
        label="Age Verification",
        description="I confirm that I am 18 years of age or older",
    ),
]

# Every flag must be ticked before accept() writes the record
REQUIRED_CONSENT_FLAGS = (
    "has_read_disclaimer",
    "has_consented",
    "acknowledged_risks",
    "has_healthcare_provider_approval",
    "pregnancy_screening_complete",
    "medical_conditions_screened",
)


def disclaimer_for(family: ProtocolFamily) -> Optional[ProtocolDisclaimer]:
    return PROTOCOL_DISCLAIMERS.get(ProtocolFamily(family))


def missing_consent_fields(consent: MedicalConsent) -> List[str]:
    return [flag for flag in REQUIRED_CONSENT_FLAGS if not getattr(consent, flag)]


def ailment_disclaimers(
    ailment_ids: Iterable[str],
    catalog: Optional[AilmentCatalog] = None,
) -> List[AilmentDisclaimer]:
    """Medical disclaimers of the selected ailments, in selection order."""
    catalog = AILMENT_CATALOG if catalog is None else catalog
    result = []
    for ailment_id in dict.fromkeys(ailment_ids):
        ailment = catalog.lookup(ailment_id)
        if ailment is not None and ailment.medical_disclaimer:
            result.append(AilmentDisclaimer(
                ailment_id=ailment.id,
                ailment_name=ailment.name,
                disclaimer=ailment.medical_disclaimer,
            ))
    return result
