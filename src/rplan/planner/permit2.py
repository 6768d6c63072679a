''' Permit2 allowance permits as command parameters '''

from dataclasses import dataclass, replace


MAX_UINT160 = (1 << 160) - 1
DEFAULT_DEADLINE = 3000000000000


@dataclass(frozen=True)
class PermitDetails:
    token: str
    amount: int
    expiration: int
    nonce: int

    def as_tuple(self):
        return (self.token, self.amount, self.expiration, self.nonce)


@dataclass(frozen=True)
class PermitSingle:
    details: PermitDetails
    spender: str
    sig_deadline: int

    def as_tuple(self):
        return (self.details.as_tuple(), self.spender, self.sig_deadline)


@dataclass(frozen=True)
class PermitBatch:
    details: tuple[PermitDetails, ...]
    spender: str
    sig_deadline: int

    def as_tuple(self):
        return ([d.as_tuple() for d in self.details], self.spender, self.sig_deadline)


@dataclass(frozen=True)
class Permit2Permit:
    permit: PermitSingle
    signature: bytes

    # PERMIT
    def as_params(self):
        return [self.permit.as_tuple(), self.signature]


@dataclass(frozen=True)
class Permit2PermitBatch:
    permit: PermitBatch
    signature: bytes

    # PERMIT2_PERMIT_BATCH
    def as_params(self):
        return [self.permit.as_tuple(), self.signature]


def make_details(
    token: str,
    amount: int = MAX_UINT160,
    nonce: int = 0,
    expiration: int = DEFAULT_DEADLINE
) -> PermitDetails:
    return PermitDetails(token, amount, expiration, nonce)


def make_permit(
    token: str,
    spender: str,
    amount: int = MAX_UINT160,
    nonce: int = 0,
    expiration: int = DEFAULT_DEADLINE,
    sig_deadline: int = DEFAULT_DEADLINE
) -> PermitSingle:
    details = make_details(token, amount, nonce, expiration)
    return PermitSingle(details, spender, sig_deadline)


def make_permit_batch(
    tokens: list[str],
    spender: str,
    sig_deadline: int = DEFAULT_DEADLINE
) -> PermitBatch:
    details = tuple(make_details(token) for token in tokens)
    return PermitBatch(details, spender, sig_deadline)


def to_input_permit(signature: bytes, permit: PermitSingle | PermitBatch):
    if isinstance(permit, PermitBatch):
        return Permit2PermitBatch(permit, signature)

    return Permit2Permit(permit, signature)


def with_nonce(permit: PermitSingle, nonce: int) -> PermitSingle:
    return replace(permit, details=replace(permit.details, nonce=nonce))
