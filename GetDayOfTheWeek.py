import logging

import azure.functions as func

WELCOME_MESSAGE = "Welcome to Azure Functions!"

GetDayOfTheWeek = func.Blueprint()


@GetDayOfTheWeek.function_name(name="GetDayOfTheWeek")
@GetDayOfTheWeek.route(
    route="GetDayOfTheWeek",
    methods=[func.HttpMethod.GET, func.HttpMethod.POST],
    auth_level=func.AuthLevel.ANONYMOUS,
)
def main(req: func.HttpRequest) -> func.HttpResponse:
    logging.info('Python HTTP trigger function "GetDayOfTheWeek" processed a request.')

    return func.HttpResponse(
        WELCOME_MESSAGE, status_code=200, mimetype="text/plain", charset="utf-8"
    )
