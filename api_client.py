import requests

url = "http://127.0.0.1:5000/api/eps"

# Input deck (JSON)
payload = {
    "name": "API Test Case 1",
    "deck": {
        "endscale": True,
        "scalecrs": "NO",
        "jfunc": "GAS",
        "fields": ["SWL", "KRW", "KRO", "SWATINIT"]
    },
    "material": {"pe": 1500.0, "alpha": 2.5}
}

if __name__ == "__main__":
    print("Sending request to server...")
    response = requests.post(url, json=payload)

    print(f"Status Code: {response.status_code}")
    print("Response:", response.json())
