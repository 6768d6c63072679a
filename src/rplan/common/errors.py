from eth_abi.exceptions import EncodingError


class PlannerError(Exception):
    pass


class UnknownOpcode(PlannerError):
    def __init__(self, opcode: object):
        super().__init__(f'Unknown command type {opcode!r}')
        self.opcode = opcode


class RevertNotAllowed(PlannerError):
    def __init__(self, command_type: int):
        super().__init__(f'Command type 0x{command_type:02x} cannot be allowed to revert')
        self.command_type = command_type


class PlanMismatch(PlannerError):
    pass


class PlanFileError(PlannerError):
    pass


class ParameterMismatch(EncodingError):
    ''' Parameters do not fit the command schema '''
    pass


__all__ = [
    'EncodingError',
    'ParameterMismatch',
    'PlanFileError',
    'PlanMismatch',
    'PlannerError',
    'RevertNotAllowed',
    'UnknownOpcode',
]
