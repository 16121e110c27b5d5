# backend/client.py
import requests

API = "http://localhost:3000/api"  # adjust if running on another host/port

def test_health():
    r = requests.get(f"{API}/sistema/health")
    print("Health:", r.status_code, r.json())

def test_create_task():
    payload = {
        "titulo": "Finish FastAPI client",
        "descricao": "Write a simple requests-based client script",
        "prioridade": "alta",
    }
    r = requests.post(f"{API}/tarefas", json=payload)
    print("Create task:", r.status_code, r.json())
    return r.json().get("id")

def test_update_task(task_id):
    r = requests.put(f"{API}/tarefas/{task_id}", json={"status": "concluida"})
    print("Update task:", r.status_code, r.json())

def test_list_tasks():
    r = requests.get(f"{API}/tarefas", params={"status": "concluida"})
    print("List tasks:", r.status_code, r.json())
    r = requests.get(f"{API}/tarefas/stats")
    print("Stats:", r.status_code, r.json())

def test_utilities():
    r = requests.get(f"{API}/utilidades/uuid", params={"quantidade": 3})
    print("UUIDs:", r.status_code, r.json())
    r = requests.post(f"{API}/utilidades/hash", json={"texto": "abc", "algoritmo": "sha256"})
    print("Hash:", r.status_code, r.json())
    r = requests.get(f"{API}/utilidades/senha", params={"tamanho": 20, "incluirSimbolos": "false"})
    print("Password:", r.status_code, r.json())
    r = requests.post(f"{API}/utilidades/converter", json={"texto": "Hello", "formato": "reverse"})
    print("Convert:", r.status_code, r.json())
    r = requests.post(f"{API}/utilidades/analisar-texto", json={"texto": "Hello World 42!"})
    print("Analyze:", r.status_code, r.json())

def test_system():
    for view in ("info", "memoria", "cpus", "rede", "processo"):
        r = requests.get(f"{API}/sistema/{view}")
        print(f"System {view}:", r.status_code)

if __name__ == "__main__":
    print("--- Testing FastAPI backend ---")
    test_health()
    task_id = test_create_task()
    test_update_task(task_id)
    test_list_tasks()
    test_utilities()
    test_system()
