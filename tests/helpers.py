def data_of(response):
    return response.json()["data"]
