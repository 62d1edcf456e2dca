"""
Consent Gate

State machine guarding the `enabled` flag of the longevity and cleanse
configurations of one session.

    DISABLED --request_enable (no consent on record)--> PENDING_CONSENT
    DISABLED --request_enable (consent on record)-----> ENABLED
    PENDING_CONSENT --accept(consent)-----------------> ENABLED
    PENDING_CONSENT --decline()-----------------------> DISABLED
    ENABLED --disable()-------------------------------> DISABLED

The gate is conservative: the first enable of either family in a session
always asks for consent, whatever the intensity. Disabling never revokes
the consent record.

At most one family is pending at a time. A request for the other family
while one is pending moves the pending slot to the new family.

The gate owns no presentation state. Listeners receive a GateTransition
for every change and decide what to show.

Version: consent_gate_v1
"""

import logging
from typing import Callable, List, Optional

from ..session.aggregator import ProtocolSession
from ..session.models import MedicalConsent, ProtocolFamily, SpecializedProtocolConfig, utc_now
from ..shared.errors import ProtocolErrorCode, ValidationFailure
from .disclaimer import missing_consent_fields
from .models import ConsentStatus, GateState, GateTransition

logger = logging.getLogger(__name__)

GATED_FAMILIES = (ProtocolFamily.LONGEVITY, ProtocolFamily.CLEANSE)

TransitionListener = Callable[[GateTransition], None]


def _gated_family(family: ProtocolFamily) -> ProtocolFamily:
    try:
        family = ProtocolFamily(family)
    except ValueError:
        family = None
    if family not in GATED_FAMILIES:
        raise ValidationFailure(
            ProtocolErrorCode.UNSUPPORTED_PROTOCOL_FAMILY,
            "Only longevity and cleanse protocols are consent gated",
            details={"family": str(family), "gated": [f.value for f in GATED_FAMILIES]},
        )
    return family


class ConsentGate:

    def __init__(self, session: ProtocolSession):
        self._session = session
        self._pending: Optional[ProtocolFamily] = None
        self._listeners: List[TransitionListener] = []

    @property
    def session(self) -> ProtocolSession:
        return self._session

    @property
    def pending_family(self) -> Optional[ProtocolFamily]:
        return self._pending

    def state(self, family: ProtocolFamily) -> GateState:
        family = _gated_family(family)
        if self._pending == family:
            return GateState.PENDING_CONSENT
        if self._session.is_family_enabled(family):
            return GateState.ENABLED
        return GateState.DISABLED

    def status(self) -> ConsentStatus:
        snapshot = self._session.snapshot()
        return ConsentStatus(
            pending_family=self._pending,
            longevity=self.state(ProtocolFamily.LONGEVITY),
            cleanse=self.state(ProtocolFamily.CLEANSE),
            has_consented=snapshot.consent.has_consented,
            requires_medical_consent=snapshot.requires_medical_consent(),
            has_valid_consent=snapshot.has_valid_consent(),
        )

    # =========================================================================
    # LISTENERS
    # =========================================================================

    def subscribe(self, listener: TransitionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, family: ProtocolFamily, previous: GateState, current: GateState, reason: str) -> None:
        logger.info(
            f"Session {self._session.session_id}: {family.value} {previous.value} -> {current.value} ({reason})"
        )
        transition = GateTransition(family=family, previous=previous, current=current, reason=reason)
        for listener in list(self._listeners):
            listener(transition)

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def request_enable(self, family: ProtocolFamily) -> GateState:
        """
        Ask to switch a protocol family on.

        Returns ENABLED when consent is already on record, otherwise
        PENDING_CONSENT and the family stays disabled until accept().
        """
        family = _gated_family(family)
        previous = self.state(family)

        if previous == GateState.ENABLED:
            return previous
        if previous == GateState.PENDING_CONSENT:
            return previous

        if self._session.consent.has_consented:
            self._session._set_enabled(family, True)
            self._emit(family, previous, GateState.ENABLED, "consent on record")
            return GateState.ENABLED

        superseded = self._pending
        self._pending = family
        if superseded is not None:
            self._emit(superseded, GateState.PENDING_CONSENT, GateState.DISABLED, f"superseded by {family.value}")
        self._emit(family, previous, GateState.PENDING_CONSENT, "medical consent required")
        return GateState.PENDING_CONSENT

    def accept(self, consent: MedicalConsent) -> SpecializedProtocolConfig:
        """
        Record consent and enable the pending family in one notified mutation.

        Accepting is itself the act of consenting, so has_consented is set and
        a missing timestamp is stamped with the current time. Every other
        flag must already be true.
        """
        if self._pending is None:
            raise ValidationFailure(
                ProtocolErrorCode.NO_PENDING_CONSENT,
                "There is no protocol waiting for medical consent",
            )

        consent = consent.model_copy(update={
            "has_consented": True,
            "consent_timestamp": consent.consent_timestamp or utc_now(),
        })
        missing = missing_consent_fields(consent)
        if missing:
            logger.warning(
                f"Session {self._session.session_id}: incomplete consent for {self._pending.value}, missing {missing}"
            )
            raise ValidationFailure(
                ProtocolErrorCode.CONSENT_INCOMPLETE,
                "All disclaimer acknowledgements and screenings are required",
                details={"family": self._pending.value, "missing": missing},
            )

        family = self._pending
        with self._session.batch():
            self._session._record_consent(consent)
            self._session._set_enabled(family, True)
        self._pending = None
        self._emit(family, GateState.PENDING_CONSENT, GateState.ENABLED, "consent accepted")
        return self._session.snapshot()

    def decline(self) -> GateState:
        """Close the pending consent request. Nothing is written."""
        if self._pending is None:
            raise ValidationFailure(
                ProtocolErrorCode.NO_PENDING_CONSENT,
                "There is no protocol waiting for medical consent",
            )
        family = self._pending
        self._pending = None
        self._emit(family, GateState.PENDING_CONSENT, GateState.DISABLED, "consent declined")
        return GateState.DISABLED

    def disable(self, family: ProtocolFamily) -> GateState:
        """Switch a family off. Always permitted; the consent record is kept."""
        family = _gated_family(family)
        previous = self.state(family)

        if previous == GateState.PENDING_CONSENT:
            self._pending = None
            self._emit(family, previous, GateState.DISABLED, "request withdrawn")
        elif previous == GateState.ENABLED:
            self._session._set_enabled(family, False)
            self._emit(family, previous, GateState.DISABLED, "disabled")
        return GateState.DISABLED
