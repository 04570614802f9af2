from httpx import AsyncClient
from starlette import status

from src.api.core.exceptions import BadRequestException


async def test_create_habit(test_client: AsyncClient, services, habit_factory):
    """Создание привычки в месяце."""
    services["habit"].create_habit_for_month.return_value = habit_factory(id=1, name="Drink Water", month_id=2)
    payload = {"name": "  Drink Water ", "is_scoring": True}

    response = await test_client.post("/api/v1/months/2/habits", json=payload)

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["name"] == "Drink Water"
    assert data["month_id"] == 2

    kwargs = services["habit"].create_habit_for_month.await_args.kwargs
    assert kwargs["month_id"] == 2
    assert kwargs["habit_in"].name == "Drink Water"
    assert kwargs["habit_in"].sort_order is None


async def test_create_habit_with_blank_name(test_client: AsyncClient, services):
    response = await test_client.post("/api/v1/months/2/habits", json={"name": "   "})

    assert response.status_code == 422
    services["habit"].create_habit_for_month.assert_not_awaited()


async def test_create_habit_in_locked_month(test_client: AsyncClient, services):
    services["habit"].create_habit_for_month.side_effect = BadRequestException(
        message="Структура привычек месяца зафиксирована, добавлять привычки нельзя.",
        error_type="month_locked",
    )

    response = await test_client.post("/api/v1/months/2/habits", json={"name": "Run"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"][0]["type"] == "month_locked"


async def test_get_habits_list(test_client: AsyncClient, services, habit_factory):
    """Привычки возвращаются в порядке, который отдал сервис."""
    services["habit"].get_habits_for_month.return_value = [
        habit_factory(id=1, name="Sleep", sort_order=0),
        habit_factory(id=2, name="Weight", is_scoring=False, sort_order=1),
    ]

    response = await test_client.get("/api/v1/months/1/habits")

    assert response.status_code == status.HTTP_200_OK
    assert [(h["name"], h["is_scoring"]) for h in response.json()] == [("Sleep", True), ("Weight", False)]
