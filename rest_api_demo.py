import requests
import os

# BASE_URL = "https://example.org/sdrf2graph"
BASE_URL = "http://127.0.0.1:10080"


def draw(input_path, output_format="svg", sheet_name="sdrf", layout="left-to-right", edge_label=True):
    print(f"\n>>> Drawing [{output_format}] for: {input_path}")
    url = f"{BASE_URL}/sdrf"

    # API options, same as CLI
    data = {
        'format': output_format,
        'sheet_name': sheet_name,
        'layout': layout,
        'edge_label': 'true' if edge_label else 'false',
    }

    with open(input_path, 'rb') as f:
        response = requests.post(url, files={'filename': (os.path.basename(input_path), f)}, data=data)

    if response.status_code == 200:
        output = f"demo_output.{output_format}"
        with open(output, "wb") as f:
            f.write(response.content)
        print(f"Successfully saved to: {output}")
        print(f"Nodes Count: {response.headers.get('X-Stats-Nodes')}")
        print(f"Edges Count: {response.headers.get('X-Stats-Edges')}")
        print(f"Warnings: {response.headers.get('X-Warnings')}")
        return output
    print(f"Error {response.status_code}: {response.text}")


if __name__ == "__main__":
    test_sdrf = os.path.join(os.path.dirname(__file__), "sdrf2graph", "data", "example.sdrf.txt")

    if os.path.exists(test_sdrf):
        draw(test_sdrf, output_format="dot")
        draw(test_sdrf, output_format="svg")
        draw(test_sdrf, output_format="png", layout="top-to-down", edge_label=False)
    else:
        print(f"Please ensure {test_sdrf} exists to run the demo.")
