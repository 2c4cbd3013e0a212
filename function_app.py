import azure.functions as func

from GetDayOfTheWeek import GetDayOfTheWeek

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

app.register_functions(GetDayOfTheWeek)
