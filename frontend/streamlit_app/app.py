import os, requests, streamlit as st

API = os.getenv("API_URL", "http://localhost:3000/api")

PRIORITIES = ["baixa", "media", "alta"]
STATUSES = ["pendente", "em_andamento", "concluida"]

st.set_page_config(page_title="API Teste UI", layout="centered")
st.title("API Teste — tarefas & utilidades")

st.subheader("Nova tarefa")
with st.form("create"):
    titulo = st.text_input("Título")
    descricao = st.text_area("Descrição")
    prioridade = st.selectbox("Prioridade", PRIORITIES, index=1)
    status = st.selectbox("Status", STATUSES)
    if st.form_submit_button("Salvar"):
        r = requests.post(f"{API}/tarefas", json={
            "titulo": titulo, "descricao": descricao, "prioridade": prioridade, "status": status,
        })
        st.write(r.json())

st.subheader("Tarefas")
filtro = st.selectbox("Filtrar por status", ["(todos)"] + STATUSES)
if st.button("Atualizar lista"):
    params = {} if filtro == "(todos)" else {"status": filtro}
    r = requests.get(f"{API}/tarefas", params=params)
    st.write(r.json())
    st.write(requests.get(f"{API}/tarefas/stats").json())

st.subheader("Utilidades")
texto = st.text_input("Texto")
formato = st.selectbox("Converter para", ["base64", "hex", "uppercase", "lowercase", "reverse"])
if st.button("Converter"):
    r = requests.post(f"{API}/utilidades/converter", json={"texto": texto, "formato": formato})
    st.write(r.json())
if st.button("Analisar"):
    r = requests.post(f"{API}/utilidades/analisar-texto", json={"texto": texto})
    st.write(r.json())
if st.button("Gerar senha"):
    st.write(requests.get(f"{API}/utilidades/senha").json())

st.subheader("Sistema")
if st.button("Health check"):
    r = requests.get(f"{API}/sistema/health")
    st.write(r.status_code, r.json())
