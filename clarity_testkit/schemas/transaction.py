"""Transaction Schemas — value objects for the transactions a test submits to the engine.

Invariants:
    - Exactly one payload is set, matching Tx.type (TxType)
    - Contract-call args are notation strings (see core/encode_values)
    - to_engine() emits the engine's camelCase keys and omits unset payloads

Design Decisions:
    - Classmethod constructors (transfer_stx, contract_call, deploy_contract) keep the
      type tag and payload in sync; building Tx by hand is allowed but unchecked
    - Field aliases over a custom serializer: pydantic handles camelCase natively
"""

from pydantic import BaseModel, ConfigDict, Field

from clarity_testkit.core.domain_types import TxType


class TxTransfer(BaseModel):
    """STX transfer payload."""
    amount: int = Field(ge=0)
    recipient: str


class TxContractCall(BaseModel):
    """Public function call payload."""
    contract: str
    method: str
    args: list[str] = Field(default_factory=list)


class TxDeployContract(BaseModel):
    """Contract deployment payload."""
    name: str
    code: str


class Tx(BaseModel):
    """Tagged transaction: type + sender + one payload."""
    model_config = ConfigDict(populate_by_name=True)

    type: TxType
    sender: str
    contract_call: TxContractCall | None = Field(None, alias="contractCall")
    transfer_stx: TxTransfer | None = Field(None, alias="transferStx")
    deploy_contract: TxDeployContract | None = Field(None, alias="deployContract")

    @classmethod
    def transfer_stx_tx(cls, amount: int, recipient: str, sender: str) -> "Tx":
        return cls(
            type=TxType.TRANSFER_STX, sender=sender,
            transfer_stx=TxTransfer(amount=amount, recipient=recipient),
        )

    @classmethod
    def contract_call_tx(
        cls, contract: str, method: str, args: list[str], sender: str,
    ) -> "Tx":
        return cls(
            type=TxType.CONTRACT_CALL, sender=sender,
            contract_call=TxContractCall(contract=contract, method=method, args=list(args)),
        )

    @classmethod
    def deploy_contract_tx(cls, name: str, code: str, sender: str) -> "Tx":
        return cls(
            type=TxType.DEPLOY_CONTRACT, sender=sender,
            deploy_contract=TxDeployContract(name=name, code=code),
        )

    def to_engine(self) -> dict:
        """Plain dict in the engine's wire shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
