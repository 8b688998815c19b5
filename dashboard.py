import streamlit as st
import requests

st.set_page_config(page_title="Endpoint Scaling Dashboard", page_icon="🛢️", layout="wide")

BASE_URL = "http://localhost:5000/api/eps"

KNOWN_FIELDS = [
    "SWL", "SWCR", "SWU", "SOWCR", "SOGCR", "SGL", "SGCR", "SGU",
    "KRW", "KRWR", "KRO", "KRORW", "KRORG", "KRG", "KRGR",
    "PCW", "PCG", "SWATINIT",
]

st.title("🛢️ Endpoint Scaling Dashboard")
st.markdown("---")

# ==========================================
# 1. Deck keywords (Sidebar)
# ==========================================
with st.sidebar:
    st.header("⚙️ Deck Keywords")

    case_name = st.text_input("Case Name", value="Test_Case_01")

    st.subheader("RUNSPEC / PROPS")
    endscale = st.checkbox("ENDSCALE", value=True)
    scalecrs = st.selectbox("SCALECRS", ["NO", "YES"])
    jfunc = st.selectbox("JFUNC", ["(none)", "BOTH", "WATER", "GAS"])
    hysteresis = st.checkbox("SATOPTS HYSTER", value=False)

    st.subheader("Field Properties")
    fields = st.multiselect("Drainage fields", KNOWN_FIELDS, default=["SWL", "KRW"])
    imb_fields = st.multiselect("Imbibition fields", ["I" + name for name in KNOWN_FIELDS if name != "SWATINIT"])

    st.subheader("Brooks-Corey")
    pe = st.number_input("Entry pressure pe", value=1000.0)
    alpha = st.number_input("alpha", value=2.0)

tab1, tab2 = st.tabs(["🚀 Resolve", "📊 View Case"])

with tab1:
    st.info("👈 Set the deck keywords in the sidebar, then click 'Resolve'.")

    if st.button("Resolve", type="primary"):
        payload = {
            "name": case_name,
            "deck": {
                "endscale": endscale,
                "scalecrs": scalecrs,
                "jfunc": None if jfunc == "(none)" else jfunc,
                "hysteresis": hysteresis,
                "fields": fields + imb_fields,
            },
            "material": {"pe": pe, "alpha": alpha}
        }

        with st.spinner("Resolving endpoint scaling..."):
            try:
                response = requests.post(BASE_URL, json=payload)

                if response.status_code == 201:
                    data = response.json()
                    st.success("✅ Endpoint scaling resolved!")
                    st.json(data)
                    st.session_state['last_case_id'] = data['case_id']
                elif response.status_code == 409:
                    st.error(f"❌ Conflicting deck: {response.json()['error']}")
                else:
                    st.error(f"❌ Error: {response.text}")

            except requests.exceptions.ConnectionError:
                st.error("❌ Connection Failed! Is the API running? (http://localhost:5000)")

with tab2:
    default_id = st.session_state.get('last_case_id', 1)
    case_id_input = st.number_input("Case ID", min_value=1, value=default_id, step=1)

    if st.button("📈 Show Flags"):
        try:
            resp = requests.get(f"{BASE_URL}/{case_id_input}")
            if resp.status_code == 200:
                data = resp.json()
                st.write(f"Status: **{data['status']}**")
                if data.get('error'):
                    st.warning(data['error'])
                for system, directions in data['systems'].items():
                    st.subheader(system)
                    st.table(directions)
            else:
                st.error("Case not found. Check Case ID.")
        except Exception as e:
            st.error(f"Error: {e}")
