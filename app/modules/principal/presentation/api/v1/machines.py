# 📄 File: app/modules/principal/presentation/api/v1/machines.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints to register, look up and remove machines.
# 🧪 Purpose (Technical Summary):
# Thin FastAPI router over MachineService.
# 🔗 Dependencies:
# FastAPI, principal_schemas, presentation dependencies, MachineService
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (mounted under /v1/machines)

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from ....domain.services import MachineService
from ...dependencies import get_machine_service
from ..schemas import MachineCreateRequest, MachineResponse

machines_router = APIRouter()


@machines_router.post("", response_model=MachineResponse, status_code=status.HTTP_201_CREATED,
                      summary="Register a machine")
async def create_machine(
    request: MachineCreateRequest,
    machine_service: MachineService = Depends(get_machine_service),
) -> MachineResponse:
    machine = await machine_service.create_machine(request.to_domain())
    return MachineResponse.from_domain(machine)


@machines_router.get("/{machine_id}", response_model=MachineResponse, summary="Get a machine")
async def get_machine(
    machine_id: UUID,
    machine_service: MachineService = Depends(get_machine_service),
) -> MachineResponse:
    return MachineResponse.from_domain(await machine_service.get_machine(machine_id))


@machines_router.delete("/{machine_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a machine")
async def delete_machine(
    machine_id: UUID,
    machine_service: MachineService = Depends(get_machine_service),
) -> Response:
    await machine_service.delete_machine(machine_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
