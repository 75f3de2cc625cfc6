"""Rendered row maps for every supported row type and filing version.

Generated offline from the FEC's published column layouts; do not edit by hand.

RENDERED_MAPS has one entry per row-type pattern (the strings in
`fec_pipeline.schema.patterns.ROW_TYPES`). Each entry maps a version pattern
to the ordered field names of that row; versions whose layouts are identical
share one pipe-joined key. ``None`` marks a column that exists in the file but
carries no labeled field.
"""

RENDERED_MAPS = {
    "^hdr$": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "record_type", "ef_type", "fec_version", "soft_name", "soft_ver", "report_id",
            "report_number", "comment",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "record_type", "ef_type", "fec_version", "soft_name", "soft_ver", "name_delim",
            "report_id", "report_number", "comment",
        ],
    },
    "^f1[an]": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "change_of_committee_name", "committee_name",
            "street_1", "street_2", "city", "state", "zip_code", "change_of_committee_email",
            "committee_email", "change_of_committee_url", "committee_url", "submission_date",
            "signature_last_name", "signature_first_name", "signature_middle_name",
            "signature_prefix", "signature_suffix", "date_signed", "committee_type",
            "candidate_id_number", "candidate_last_name", "candidate_first_name",
            "candidate_middle_name", "candidate_prefix", "candidate_suffix", "candidate_office",
            "candidate_state", "candidate_district", "party_code", "party_type",
            "affiliated_committee_id_number", "affiliated_committee_name", "affiliated_street_1",
            "affiliated_street_2", "affiliated_city", "affiliated_state", "affiliated_zip_code",
            "affiliated_relationship_code", "custodian_last_name", "custodian_first_name",
            "custodian_middle_name", "custodian_prefix", "custodian_suffix", "custodian_street_1",
            "custodian_street_2", "custodian_city", "custodian_state", "custodian_zip_code",
            "custodian_title", "custodian_telephone", "treasurer_last_name", "treasurer_first_name",
            "treasurer_middle_name", "treasurer_prefix", "treasurer_suffix", "treasurer_street_1",
            "treasurer_street_2", "treasurer_city", "treasurer_state", "treasurer_zip_code",
            "treasurer_title", "treasurer_telephone", "agent_last_name", "agent_first_name",
            "agent_middle_name", "agent_prefix", "agent_suffix", "agent_street_1", "agent_street_2",
            "agent_city", "agent_state", "agent_zip_code", "agent_title", "agent_telephone",
            "bank_name", "bank_street_1", "bank_street_2", "bank_city", "bank_state", "bank_zip_code",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "change_of_committee_name", "committee_name",
            "street_1", "street_2", "city", "state", "zip_code", None, "committee_type",
            "candidate_id_number", "candidate_name", "candidate_office", "candidate_state",
            "candidate_district", "party_code", "party_type", "affiliated_committee_id_number",
            "affiliated_committee_name", "affiliated_street_1", "affiliated_street_2",
            "affiliated_city", "affiliated_state", "affiliated_zip_code",
            "affiliated_relationship_code", "custodian_name", "custodian_street_1",
            "custodian_street_2", "custodian_city", "custodian_state", "custodian_zip_code",
            "custodian_title", "custodian_telephone", "treasurer_name", "treasurer_street_1",
            "treasurer_street_2", "treasurer_city", "treasurer_state", "treasurer_zip_code",
            "treasurer_title", "treasurer_telephone", "agent_name", "agent_street_1",
            "agent_street_2", "agent_city", "agent_state", "agent_zip_code", "agent_title",
            "agent_telephone", "bank_name", "bank_street_1", "bank_street_2", "bank_city",
            "bank_state", "bank_zip_code", "signature_name", "date_signed",
        ],
    },
    "(^f1m[a|n])": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "committee_name", "street_1", "street_2",
            "city", "state", "zip_code", "committee_type", "affiliated_date_f1_filed",
            "affiliated_committee_id_number", "affiliated_committee_name",
            "first_candidate_id_number", "first_candidate_last_name", "first_candidate_first_name",
            "first_candidate_middle_name", "first_candidate_prefix", "first_candidate_suffix",
            "first_candidate_office", "first_candidate_state", "first_candidate_district",
            "first_candidate_contribution_date",
            "second_candidate_id_number", "second_candidate_last_name",
            "second_candidate_first_name", "second_candidate_middle_name",
            "second_candidate_prefix", "second_candidate_suffix", "second_candidate_office",
            "second_candidate_state", "second_candidate_district",
            "second_candidate_contribution_date",
            "third_candidate_id_number", "third_candidate_last_name", "third_candidate_first_name",
            "third_candidate_middle_name", "third_candidate_prefix", "third_candidate_suffix",
            "third_candidate_office", "third_candidate_state", "third_candidate_district",
            "third_candidate_contribution_date",
            "fourth_candidate_id_number", "fourth_candidate_last_name",
            "fourth_candidate_first_name", "fourth_candidate_middle_name",
            "fourth_candidate_prefix", "fourth_candidate_suffix", "fourth_candidate_office",
            "fourth_candidate_state", "fourth_candidate_district",
            "fourth_candidate_contribution_date",
            "fifth_candidate_id_number", "fifth_candidate_last_name", "fifth_candidate_first_name",
            "fifth_candidate_middle_name", "fifth_candidate_prefix", "fifth_candidate_suffix",
            "fifth_candidate_office", "fifth_candidate_state", "fifth_candidate_district",
            "fifth_candidate_contribution_date",
            "fifty_first_contributor_date", "original_registration_date", "requirements_met_date",
            "treasurer_last_name", "treasurer_first_name", "treasurer_middle_name",
            "treasurer_prefix", "treasurer_suffix", "date_signed",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "committee_name", "street_1", "street_2",
            "city", "state", "zip_code", "committee_type", "affiliated_date_f1_filed",
            "affiliated_committee_id_number", "affiliated_committee_name",
            "first_candidate_id_number", "first_candidate_name", "first_candidate_office",
            "first_candidate_state", "first_candidate_district", "first_candidate_contribution_date",
            "second_candidate_id_number", "second_candidate_name", "second_candidate_office",
            "second_candidate_state", "second_candidate_district",
            "second_candidate_contribution_date",
            "third_candidate_id_number", "third_candidate_name", "third_candidate_office",
            "third_candidate_state", "third_candidate_district", "third_candidate_contribution_date",
            "fourth_candidate_id_number", "fourth_candidate_name", "fourth_candidate_office",
            "fourth_candidate_state", "fourth_candidate_district",
            "fourth_candidate_contribution_date",
            "fifth_candidate_id_number", "fifth_candidate_name", "fifth_candidate_office",
            "fifth_candidate_state", "fifth_candidate_district", "fifth_candidate_contribution_date",
            "fifty_first_contributor_date", "original_registration_date", "requirements_met_date",
            "treasurer_name", "date_signed",
        ],
    },
    "^f13[an]": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1|^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "committee_name", "change_of_address",
            "street_1", "street_2", "city", "state", "zip_code", "report_code",
            "amendment_date", "coverage_from_date", "coverage_through_date",
            "total_donations_accepted", "total_donations_refunded", "net_donations",
            "designated_last_name", "designated_first_name", "designated_middle_name",
            "designated_prefix", "designated_suffix", "date_signed",
        ],
    },
    "^f132": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1|^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name", "entity_type",
            "contributor_organization_name", "contributor_last_name", "contributor_first_name",
            "contributor_middle_name", "contributor_prefix", "contributor_suffix",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "donation_date", "donation_amount",
            "donation_aggregate_amount", "memo_code", "memo_text_description",
        ],
    },
    "^f133": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1|^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name", "entity_type",
            "contributor_organization_name", "contributor_last_name", "contributor_first_name",
            "contributor_middle_name", "contributor_prefix", "contributor_suffix",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "refund_date", "refund_amount",
            "memo_code", "memo_text_description",
        ],
    },
    "^f1s": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1|^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "joint_fund_participant_committee_name",
            "joint_fund_participant_committee_id_number", "affiliated_committee_id_number",
            "affiliated_committee_name", "affiliated_candidate_id_number",
            "affiliated_last_name", "affiliated_first_name", "affiliated_middle_name",
            "affiliated_prefix", "affiliated_suffix", "affiliated_street_1",
            "affiliated_street_2", "affiliated_city", "affiliated_state", "affiliated_zip_code",
            "affiliated_relationship_code", "agent_last_name", "agent_first_name",
            "agent_middle_name", "agent_prefix", "agent_suffix", "agent_street_1",
            "agent_street_2", "agent_city", "agent_state", "agent_zip_code", "agent_title",
            "agent_telephone", "bank_name", "bank_street_1", "bank_street_2", "bank_city",
            "bank_state", "bank_zip_code",
        ],
    },
    "(^f2$)|(^f2[^4])": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "candidate_id_number", "candidate_last_name", "candidate_first_name",
            "candidate_middle_name", "candidate_prefix", "candidate_suffix", "street_1",
            "street_2", "city", "state", "zip_code", "party_code", "candidate_office",
            "candidate_state", "candidate_district", "election_year", "committee_id_number",
            "committee_name", "committee_street_1", "committee_street_2", "committee_city",
            "committee_state", "committee_zip_code", "authorized_committee_id_number",
            "authorized_committee_name", "authorized_committee_street_1",
            "authorized_committee_street_2", "authorized_committee_city",
            "authorized_committee_state", "authorized_committee_zip_code",
            "primary_personal_funds_declared", "general_personal_funds_declared",
            "candidate_signature_last_name", "candidate_signature_first_name",
            "candidate_signature_middle_name", "candidate_signature_prefix",
            "candidate_signature_suffix", "date_signed",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "candidate_id_number", "candidate_name", "street_1", "street_2", "city",
            "state", "zip_code", "party_code", "candidate_office", "candidate_state",
            "candidate_district", "election_year", "committee_id_number", "committee_name",
            "committee_street_1", "committee_street_2", "committee_city", "committee_state",
            "committee_zip_code", "authorized_committee_id_number", "authorized_committee_name",
            "authorized_committee_street_1", "authorized_committee_street_2",
            "authorized_committee_city", "authorized_committee_state",
            "authorized_committee_zip_code", "candidate_signature_name", "date_signed",
            "primary_personal_funds_declared", "general_personal_funds_declared",
        ],
    },
    "(^f24$)|(^f24[an])": {
        "^8.0": [
            "form_type", "filer_committee_id_number", "report_type", "original_amendment_date",
            "committee_name", "street_1", "street_2", "city", "state", "zip_code",
            "treasurer_last_name", "treasurer_first_name", "treasurer_middle_name",
            "treasurer_prefix", "treasurer_suffix", "date_signed",
        ],
        "^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "report_type", "committee_name", "street_1",
            "street_2", "city", "state", "zip_code", "treasurer_last_name", "treasurer_first_name",
            "treasurer_middle_name", "treasurer_prefix", "treasurer_suffix", "date_signed",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "committee_name", "street_1", "street_2",
            "city", "state", "zip_code",
        ],
    },
    "^f3[a|n|t]": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "committee_name", "change_of_address",
            "street_1", "street_2", "city", "state", "zip_code", "election_state",
            "election_district", "report_code", "election_code", "date_of_election",
            "state_of_election", "coverage_from_date", "coverage_through_date",
            "treasurer_last_name", "treasurer_first_name", "treasurer_middle_name",
            "treasurer_prefix", "treasurer_suffix", "date_signed",
            "col_a_6a_total_contributions_no_loans", "col_a_6b_total_contribution_refunds",
            "col_a_6c_net_contributions", "col_a_7a_total_operating_expenditures",
            "col_a_7b_total_offsets_to_operating_expenditures",
            "col_a_7c_net_operating_expenditures", "col_a_8_cash_on_hand_at_close",
            "col_a_9_debts_to", "col_a_10_debts_by", "col_a_11ai_individuals_itemized",
            "col_a_11aii_individuals_unitemized", "col_a_11aiii_individuals_total",
            "col_a_11b_political_party_committees", "col_a_11c_other_political_committees",
            "col_a_11d_the_candidate", "col_a_11e_total_contributions",
            "col_a_12_transfers_from_other_authorized_committees",
            "col_a_13a_loans_made_or_guaranteed_by_the_candidate", "col_a_13b_all_other_loans",
            "col_a_13c_total_loans", "col_a_14_offsets_to_operating_expenditures",
            "col_a_15_other_receipts", "col_a_16_total_receipts",
            "col_a_17_operating_expenditures",
            "col_a_18_transfers_to_other_authorized_committees",
            "col_a_19a_loan_repayments_of_loans_made_or_guaranteed_by_candidate",
            "col_a_19b_loan_repayments_of_all_other_loans", "col_a_19c_total_loan_repayments",
            "col_a_20a_refunds_to_individuals", "col_a_20b_refunds_to_party_committees",
            "col_a_20c_refunds_to_other_committees", "col_a_20d_total_refunds",
            "col_a_21_other_disbursements", "col_a_22_total_disbursements",
            "col_a_23_cash_beginning_reporting_period", "col_a_24_total_receipts_this_period",
            "col_a_25_subtotals", "col_a_26_total_disbursements_this_period",
            "col_a_27_cash_on_hand_at_close_period",
            "col_b_6a_total_contributions_no_loans", "col_b_6b_total_contribution_refunds",
            "col_b_6c_net_contributions", "col_b_7a_total_operating_expenditures",
            "col_b_7b_total_offsets_to_operating_expenditures",
            "col_b_7c_net_operating_expenditures", "col_b_11ai_individuals_itemized",
            "col_b_11aii_individuals_unitemized", "col_b_11aiii_individuals_total",
            "col_b_11b_political_party_committees", "col_b_11c_other_political_committees",
            "col_b_11d_the_candidate", "col_b_11e_total_contributions",
            "col_b_12_transfers_from_other_authorized_committees",
            "col_b_13a_loans_made_or_guaranteed_by_the_candidate", "col_b_13b_all_other_loans",
            "col_b_13c_total_loans", "col_b_14_offsets_to_operating_expenditures",
            "col_b_15_other_receipts", "col_b_16_total_receipts",
            "col_b_17_operating_expenditures",
            "col_b_18_transfers_to_other_authorized_committees",
            "col_b_19a_loan_repayments_of_loans_made_or_guaranteed_by_candidate",
            "col_b_19b_loan_repayments_of_all_other_loans", "col_b_19c_total_loan_repayments",
            "col_b_20a_refunds_to_individuals", "col_b_20b_refunds_to_party_committees",
            "col_b_20c_refunds_to_other_committees", "col_b_20d_total_refunds",
            "col_b_21_other_disbursements", "col_b_22_total_disbursements",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "committee_name", "change_of_address",
            "street_1", "street_2", "city", "state", "zip_code", "election_state",
            "election_district", "report_code", "election_code", "date_of_election",
            "state_of_election", "primary_election", "general_election", "special_election",
            "runoff_election", "coverage_from_date", "coverage_through_date",
            "col_a_6a_total_contributions_no_loans", "col_a_6b_total_contribution_refunds",
            "col_a_6c_net_contributions", "col_a_7a_total_operating_expenditures",
            "col_a_7b_total_offsets_to_operating_expenditures",
            "col_a_7c_net_operating_expenditures", "col_a_8_cash_on_hand_at_close",
            "col_a_9_debts_to", "col_a_10_debts_by", "col_a_11ai_individuals_itemized",
            "col_a_11aii_individuals_unitemized", "col_a_11aiii_individuals_total",
            "col_a_11b_political_party_committees", "col_a_11c_other_political_committees",
            "col_a_11d_the_candidate", "col_a_11e_total_contributions",
            "col_a_12_transfers_from_other_authorized_committees",
            "col_a_13a_loans_made_or_guaranteed_by_the_candidate", "col_a_13b_all_other_loans",
            "col_a_13c_total_loans", "col_a_14_offsets_to_operating_expenditures",
            "col_a_15_other_receipts", "col_a_16_total_receipts",
            "col_a_17_operating_expenditures",
            "col_a_18_transfers_to_other_authorized_committees",
            "col_a_19a_loan_repayments_of_loans_made_or_guaranteed_by_candidate",
            "col_a_19b_loan_repayments_of_all_other_loans", "col_a_19c_total_loan_repayments",
            "col_a_20a_refunds_to_individuals", "col_a_20b_refunds_to_party_committees",
            "col_a_20c_refunds_to_other_committees", "col_a_20d_total_refunds",
            "col_a_21_other_disbursements", "col_a_22_total_disbursements",
            "col_a_23_cash_beginning_reporting_period", "col_a_24_total_receipts_this_period",
            "col_a_25_subtotals", "col_a_26_total_disbursements_this_period",
            "col_a_27_cash_on_hand_at_close_period",
            "col_b_6a_total_contributions_no_loans", "col_b_6b_total_contribution_refunds",
            "col_b_6c_net_contributions", "col_b_7a_total_operating_expenditures",
            "col_b_7b_total_offsets_to_operating_expenditures",
            "col_b_7c_net_operating_expenditures", "col_b_11ai_individuals_itemized",
            "col_b_11aii_individuals_unitemized", "col_b_11aiii_individuals_total",
            "col_b_11b_political_party_committees", "col_b_11c_other_political_committees",
            "col_b_11d_the_candidate", "col_b_11e_total_contributions",
            "col_b_12_transfers_from_other_authorized_committees",
            "col_b_13a_loans_made_or_guaranteed_by_the_candidate", "col_b_13b_all_other_loans",
            "col_b_13c_total_loans", "col_b_14_offsets_to_operating_expenditures",
            "col_b_15_other_receipts", "col_b_16_total_receipts",
            "col_b_17_operating_expenditures",
            "col_b_18_transfers_to_other_authorized_committees",
            "col_b_19a_loan_repayments_of_loans_made_or_guaranteed_by_candidate",
            "col_b_19b_loan_repayments_of_all_other_loans", "col_b_19c_total_loan_repayments",
            "col_b_20a_refunds_to_individuals", "col_b_20b_refunds_to_party_committees",
            "col_b_20c_refunds_to_other_committees", "col_b_20d_total_refunds",
            "col_b_21_other_disbursements", "col_b_22_total_disbursements",
            "treasurer_name", "date_signed",
        ],
    },
    "^f3l[a|n]": {
        "^8.0|^7.0|^6.4": [
            "form_type", "filer_committee_id_number", "committee_name", "change_of_address",
            "street_1", "street_2", "city", "state", "zip_code", "election_state",
            "election_district", "report_code", "election_date", "semi_annual_period",
            "coverage_from_date", "coverage_through_date", "semi_annual_period_jan_june",
            "semi_annual_period_jul_dec", "quarterly_monthly_bundled_contributions",
            "semi_annual_bundled_contributions", "treasurer_last_name", "treasurer_first_name",
            "treasurer_middle_name", "treasurer_prefix", "treasurer_suffix", "date_signed",
        ],
    },
    "(^f3p$)|(^f3p[^s|3])": {
        "^8.0|^7.0": [
            "form_type", "filer_committee_id_number", "committee_name", "change_of_address",
            "street_1", "street_2", "city", "state", "zip_code", "activity_primary",
            "activity_general", "report_code", "election_code", "date_of_election",
            "state_of_election", "coverage_from_date", "coverage_through_date",
            "treasurer_last_name", "treasurer_first_name", "treasurer_middle_name",
            "treasurer_prefix", "treasurer_suffix", "date_signed",
            "col_a_6_cash_on_hand_beginning_period", "col_a_7_total_receipts", "col_a_8_subtotal",
            "col_a_9_total_disbursements", "col_a_10_cash_on_hand_close_of_period",
            "col_a_11_debts_to", "col_a_12_debts_by", "col_a_13_expenditures_subject_to_limits",
            "col_a_14_net_contributions", "col_a_15_net_operating_expenditures",
            "col_a_16_federal_funds", "col_a_17_a_i_individuals_itemized",
            "col_a_17_a_ii_individuals_unitemized", "col_a_17_a_iii_individual_contribution_total",
            "col_a_17_b_political_party_committees", "col_a_17_c_other_political_committees_pacs",
            "col_a_17_d_the_candidate", "col_a_17_e_total_contributions",
            "col_a_18_transfers_from_affiliated_other_party_committees",
            "col_a_19_a_candidate_loans", "col_a_19_b_other_loans", "col_a_19_c_total_loans",
            "col_a_20_a_operating", "col_a_20_b_fundraising", "col_a_20_c_legal_and_accounting",
            "col_a_20_d_total_offsets_to_expenditures", "col_a_21_other_receipts",
            "col_a_22_total_receipts", "col_a_23_operating_expenditures",
            "col_a_24_transfers_to_other_authorized_committees",
            "col_a_25_fundraising_disbursements",
            "col_a_26_exempt_legal_accounting_disbursement", "col_a_27_a_candidate_loans",
            "col_a_27_b_other_loans", "col_a_27_c_total_loan_repayments",
            "col_a_28_a_individuals", "col_a_28_b_political_party_committees",
            "col_a_28_c_other_political_committees", "col_a_28_d_total_contributions_refunds",
            "col_a_29_other_disbursements", "col_a_30_total_disbursements",
            "col_a_31_items_on_hand_to_be_liquidated",
            "col_b_16_federal_funds", "col_b_17_a_i_individuals_itemized",
            "col_b_17_a_ii_individuals_unitemized", "col_b_17_a_iii_individual_contribution_total",
            "col_b_17_b_political_party_committees", "col_b_17_c_other_political_committees_pacs",
            "col_b_17_d_the_candidate", "col_b_17_e_total_contributions",
            "col_b_18_transfers_from_affiliated_other_party_committees",
            "col_b_19_a_candidate_loans", "col_b_19_b_other_loans", "col_b_19_c_total_loans",
            "col_b_20_a_operating", "col_b_20_b_fundraising", "col_b_20_c_legal_and_accounting",
            "col_b_20_d_total_offsets_to_expenditures", "col_b_21_other_receipts",
            "col_b_22_total_receipts", "col_b_23_operating_expenditures",
            "col_b_24_transfers_to_other_authorized_committees",
            "col_b_25_fundraising_disbursements",
            "col_b_26_exempt_legal_accounting_disbursement", "col_b_27_a_candidate_loans",
            "col_b_27_b_other_loans", "col_b_27_c_total_loan_repayments",
            "col_b_28_a_individuals", "col_b_28_b_political_party_committees",
            "col_b_28_c_other_political_committees", "col_b_28_d_total_contributions_refunds",
            "col_b_29_other_disbursements", "col_b_30_total_disbursements",
        ],
        "^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "committee_name", "change_of_address",
            "street_1", "street_2", "city", "state", "zip_code", "report_code", "election_code",
            "date_of_election", "state_of_election", "coverage_from_date",
            "coverage_through_date", "treasurer_last_name", "treasurer_first_name",
            "treasurer_middle_name", "treasurer_prefix", "treasurer_suffix", "date_signed",
            "col_a_6_cash_on_hand_beginning_period", "col_a_7_total_receipts", "col_a_8_subtotal",
            "col_a_9_total_disbursements", "col_a_10_cash_on_hand_close_of_period",
            "col_a_11_debts_to", "col_a_12_debts_by", "col_a_13_expenditures_subject_to_limits",
            "col_a_14_net_contributions", "col_a_15_net_operating_expenditures",
            "col_a_16_federal_funds", "col_a_17_a_i_individuals_itemized",
            "col_a_17_a_ii_individuals_unitemized", "col_a_17_a_iii_individual_contribution_total",
            "col_a_17_b_political_party_committees", "col_a_17_c_other_political_committees_pacs",
            "col_a_17_d_the_candidate", "col_a_17_e_total_contributions",
            "col_a_18_transfers_from_affiliated_other_party_committees",
            "col_a_19_a_candidate_loans", "col_a_19_b_other_loans", "col_a_19_c_total_loans",
            "col_a_20_a_operating", "col_a_20_b_fundraising", "col_a_20_c_legal_and_accounting",
            "col_a_20_d_total_offsets_to_expenditures", "col_a_21_other_receipts",
            "col_a_22_total_receipts", "col_a_23_operating_expenditures",
            "col_a_24_transfers_to_other_authorized_committees",
            "col_a_25_fundraising_disbursements",
            "col_a_26_exempt_legal_accounting_disbursement", "col_a_27_a_candidate_loans",
            "col_a_27_b_other_loans", "col_a_27_c_total_loan_repayments",
            "col_a_28_a_individuals", "col_a_28_b_political_party_committees",
            "col_a_28_c_other_political_committees", "col_a_28_d_total_contributions_refunds",
            "col_a_29_other_disbursements", "col_a_30_total_disbursements",
            "col_a_31_items_on_hand_to_be_liquidated",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "committee_name", "change_of_address",
            "street_1", "street_2", "city", "state", "zip_code", "activity_primary",
            "activity_general", "report_code", "election_code", "date_of_election",
            "state_of_election", "coverage_from_date", "coverage_through_date",
            "col_a_6_cash_on_hand_beginning_period", "col_a_7_total_receipts", "col_a_8_subtotal",
            "col_a_9_total_disbursements", "col_a_10_cash_on_hand_close_of_period",
            "col_a_11_debts_to", "col_a_12_debts_by", "col_a_13_expenditures_subject_to_limits",
            "col_a_14_net_contributions", "col_a_15_net_operating_expenditures",
            "col_a_16_federal_funds", "col_a_17_a_i_individuals_itemized",
            "col_a_17_a_ii_individuals_unitemized", "col_a_17_a_iii_individual_contribution_total",
            "col_a_17_b_political_party_committees", "col_a_17_c_other_political_committees_pacs",
            "col_a_17_d_the_candidate", "col_a_17_e_total_contributions",
            "col_a_22_total_receipts", "col_a_28_a_individuals", "col_a_30_total_disbursements",
            "treasurer_name", "date_signed",
        ],
    },
    "^f3p31": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number", "entity_type",
            "contributor_organization_name", "contributor_last_name", "contributor_first_name",
            "contributor_middle_name", "contributor_prefix", "contributor_suffix",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "election_code",
            "election_other_description", "contribution_date", "contribution_amount",
            "contribution_purpose_code", "contribution_purpose_descrip", "contributor_employer",
            "contributor_occupation", "item_description", "item_contribution_aquired_date",
            "item_fair_market_value", "memo_code", "memo_text_description",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type", "contributor_name",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "election_code",
            "election_other_description", "contributor_employer", "contributor_occupation",
            "contribution_date", "contribution_amount", "contribution_purpose_code",
            "contribution_purpose_descrip", "item_description", "item_contribution_aquired_date",
            "item_fair_market_value", "memo_code", "memo_text_description", None,
            "transaction_id_number",
        ],
    },
    "^f3ps": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1|^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "date_general_election",
            "date_day_after_general_election", "net_contributions", "net_expenditures",
            "federal_funds", "a_i_individuals_itemized", "a_ii_individuals_unitemized",
            "a_iii_individual_contribution_total", "b_political_party_committees",
            "c_other_political_committees_pacs", "d_the_candidate", "e_total_contributions",
            "transfers_from_aff_other_party_cmttees", "a_candidate_loans", "b_other_loans",
            "c_total_loans", "a_operating", "b_fundraising", "c_legal_and_accounting",
            "d_total_offsets", "other_receipts", "total_receipts", "operating_expenditures",
            "transfers_to_other_authorized_committees", "fundraising_disbursements",
            "exempt_legal_accounting_disbursement", "a_candidate_loans_repayments",
            "b_other_repayments", "c_total_loan_repayments", "a_individuals_refunds",
            "b_political_party_committees_refunds", "c_other_political_committees",
            "d_total_contributions_refunds", "other_disbursements", "total_disbursements",
        ],
    },
    "^f3s": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1|^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "date_general_election",
            "date_day_after_general_election", "a_total_contributions_no_loans",
            "b_total_contribution_refunds", "c_net_contributions",
            "a_total_operating_expenditures", "b_total_offsets_to_operating_expenditures",
            "c_net_operating_expenditures", "a_i_individuals_itemized",
            "a_ii_individuals_unitemized", "a_iii_individuals_total",
            "b_political_party_committees", "c_all_other_political_committees_pacs",
            "d_the_candidate", "e_total_contributions", "transfers_from_other_auth_committees",
            "a_loans_made_or_guarn_by_the_candidate", "b_all_other_loans", "c_total_loans",
            "offsets_to_operating_expenditures", "other_receipts", "total_receipts",
            "operating_expenditures", "transfers_to_other_auth_committees",
            "a_loan_repayment_by_candidate", "b_loan_repayments_all_other_loans",
            "c_total_loan_repayments", "a_refund_individuals_other_than_pol_cmtes",
            "b_refund_political_party_committees", "c_refund_other_political_committees",
            "d_total_contributions_refunds", "other_disbursements", "total_disbursements",
        ],
    },
    "(^f3x$)|(^f3x[ant])": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "committee_name", "change_of_address",
            "street_1", "street_2", "city", "state", "zip_code", "report_code", "election_code",
            "date_of_election", "state_of_election", "coverage_from_date",
            "coverage_through_date", "qualified_committee", "treasurer_last_name",
            "treasurer_first_name", "treasurer_middle_name", "treasurer_prefix",
            "treasurer_suffix", "date_signed",
            "col_a_6b_cash_on_hand_beginning_period", "col_a_6c_total_receipts",
            "col_a_6d_subtotal", "col_a_7_total_disbursements", "col_a_8_cash_on_hand_at_close",
            "col_a_9_debts_to", "col_a_10_debts_by", "col_a_11ai_itemized",
            "col_a_11aii_unitemized", "col_a_11aiii_total",
            "col_a_11b_political_party_committees", "col_a_11c_other_political_committees_pacs",
            "col_a_11d_total_contributions",
            "col_a_12_transfers_from_affiliated_other_party_cmtes",
            "col_a_13_all_loans_received", "col_a_14_loan_repayments_received",
            "col_a_15_offsets_to_operating_expenditures_refunds",
            "col_a_16_refunds_of_federal_contributions",
            "col_a_17_other_federal_receipts_dividends",
            "col_a_18a_transfers_from_nonfederal_account_h3",
            "col_a_18b_transfers_from_non_federal_levin_h5",
            "col_a_18c_total_non_federal_transfers", "col_a_19_total_receipts",
            "col_a_20_total_federal_receipts", "col_a_21ai_federal_share",
            "col_a_21aii_non_federal_share", "col_a_21b_other_federal_operating_expenditures",
            "col_a_21c_total_operating_expenditures",
            "col_a_22_transfers_to_affiliated_other_party_cmtes",
            "col_a_23_contributions_to_federal_candidates_cmtes",
            "col_a_24_independent_expenditures", "col_a_25_coordinated_expend_made_by_party_cmtes",
            "col_a_26_loan_repayments_made", "col_a_27_loans_made",
            "col_a_28a_individuals_persons", "col_a_28b_political_party_committees",
            "col_a_28c_other_political_committees", "col_a_28d_total_contributions_refunds",
            "col_a_29_other_disbursements", "col_a_30ai_shared_federal_activity_h6_fed_share",
            "col_a_30aii_shared_federal_activity_h6_nonfed",
            "col_a_30b_non_allocable_100_federal_election_activity",
            "col_a_30c_total_federal_election_activity", "col_a_31_total_disbursements",
            "col_a_32_total_federal_disbursements", "col_a_33_total_contributions",
            "col_a_34_total_contribution_refunds", "col_a_35_net_contributions",
            "col_a_36_total_federal_operating_expenditures",
            "col_a_37_offsets_to_operating_expenditures",
            "col_a_38_net_operating_expenditures",
            "col_b_6a_cash_on_hand_jan_1", "col_b_year", "col_b_6c_total_receipts",
            "col_b_6d_subtotal", "col_b_7_total_disbursements", "col_b_8_cash_on_hand_close",
            "col_b_11ai_itemized", "col_b_11aii_unitemized", "col_b_11aiii_total",
            "col_b_11b_political_party_committees", "col_b_11c_other_political_committees_pacs",
            "col_b_11d_total_contributions",
            "col_b_12_transfers_from_affiliated_other_party_cmtes",
            "col_b_13_all_loans_received", "col_b_14_loan_repayments_received",
            "col_b_15_offsets_to_operating_expenditures_refunds",
            "col_b_16_refunds_of_federal_contributions",
            "col_b_17_other_federal_receipts_dividends",
            "col_b_18a_transfers_from_nonfederal_account_h3",
            "col_b_18b_transfers_from_non_federal_levin_h5",
            "col_b_18c_total_non_federal_transfers", "col_b_19_total_receipts",
            "col_b_20_total_federal_receipts", "col_b_21ai_federal_share",
            "col_b_21aii_non_federal_share", "col_b_21b_other_federal_operating_expenditures",
            "col_b_21c_total_operating_expenditures",
            "col_b_22_transfers_to_affiliated_other_party_cmtes",
            "col_b_23_contributions_to_federal_candidates_cmtes",
            "col_b_24_independent_expenditures", "col_b_25_coordinated_expend_made_by_party_cmtes",
            "col_b_26_loan_repayments_made", "col_b_27_loans_made",
            "col_b_28a_individuals_persons", "col_b_28b_political_party_committees",
            "col_b_28c_other_political_committees", "col_b_28d_total_contributions_refunds",
            "col_b_29_other_disbursements", "col_b_30ai_shared_federal_activity_h6_fed_share",
            "col_b_30aii_shared_federal_activity_h6_nonfed",
            "col_b_30b_non_allocable_100_federal_election_activity",
            "col_b_30c_total_federal_election_activity", "col_b_31_total_disbursements",
            "col_b_32_total_federal_disbursements", "col_b_33_total_contributions",
            "col_b_34_total_contribution_refunds", "col_b_35_net_contributions",
            "col_b_36_total_federal_operating_expenditures",
            "col_b_37_offsets_to_operating_expenditures",
            "col_b_38_net_operating_expenditures",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "committee_name", "change_of_address",
            "street_1", "street_2", "city", "state", "zip_code", "report_code", "election_code",
            "date_of_election", "state_of_election", "coverage_from_date",
            "coverage_through_date", "qualified_committee", "treasurer_name", "date_signed",
            "col_a_6b_cash_on_hand_beginning_period", "col_a_6c_total_receipts",
            "col_a_6d_subtotal", "col_a_7_total_disbursements", "col_a_8_cash_on_hand_at_close",
            "col_a_9_debts_to", "col_a_10_debts_by", "col_a_11ai_itemized",
            "col_a_11aii_unitemized", "col_a_11aiii_total",
            "col_a_11b_political_party_committees", "col_a_11c_other_political_committees_pacs",
            "col_a_11d_total_contributions", "col_a_19_total_receipts",
            "col_a_31_total_disbursements", "col_a_33_total_contributions",
            "col_a_34_total_contribution_refunds", "col_a_35_net_contributions",
            "col_b_6a_cash_on_hand_jan_1", "col_b_year", "col_b_6c_total_receipts",
            "col_b_6d_subtotal", "col_b_7_total_disbursements", "col_b_8_cash_on_hand_close",
            "col_b_19_total_receipts", "col_b_31_total_disbursements",
            "col_b_35_net_contributions",
        ],
    },
    "^f3z": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1|^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "pcc_committee_name",
            "authorized_committee_id_number", "authorized_committee_name",
            "coverage_from_date", "coverage_through_date", "net_contributions",
            "net_operating_expenditures", "debts_owed_to_committee", "debts_owed_by_committee",
            "individual_contributions", "political_party_contributions",
            "other_political_committee_contributions", "candidate_contributions",
            "total_contributions", "transfers_from_other_authorized_committees",
            "loans_made_by_candidate", "all_other_loans", "total_loans",
            "offsets_to_operating_expenditures", "other_receipts", "total_receipts",
            "operating_expenditures", "transfers_to_other_authorized_committees",
            "repayment_of_loans_by_candidate", "repayment_of_all_other_loans",
            "total_loan_repayments", "refunds_to_individuals", "refunds_to_party_committees",
            "refunds_to_other_committees", "total_refunds", "other_disbursements",
            "total_disbursements", "cash_beginning_reporting_period",
            "cash_end_reporting_period",
        ],
    },
    "^f4[na]": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "committee_name", "street_1", "street_2",
            "city", "state", "zip_code", "committee_type", "committee_type_description",
            "report_code", "coverage_from_date", "coverage_through_date", "treasurer_last_name",
            "treasurer_first_name", "treasurer_middle_name", "treasurer_prefix",
            "treasurer_suffix", "date_signed", "col_a_cash_on_hand_beginning_reporting_period",
            "col_a_total_receipts", "col_a_subtotal", "col_a_total_disbursements",
            "col_a_cash_on_hand_close_of_period", "col_a_debts_to", "col_a_debts_by",
            "col_a_convention_expenditures", "col_a_refunds_rebates_returns_deposits",
            "col_a_expenditures_from_subaccount", "col_a_total_expenditures",
            "col_b_cash_on_hand_beginning_reporting_period", "col_b_total_receipts",
            "col_b_subtotal", "col_b_total_disbursements", "col_b_cash_on_hand_close_of_period",
            "col_b_convention_expenditures", "col_b_refunds_rebates_returns_deposits",
            "col_b_expenditures_from_subaccount", "col_b_total_expenditures",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "committee_name", "street_1", "street_2",
            "city", "state", "zip_code", "committee_type", "committee_type_description",
            "report_code", "coverage_from_date", "coverage_through_date",
            "col_a_cash_on_hand_beginning_reporting_period", "col_a_total_receipts",
            "col_a_subtotal", "col_a_total_disbursements", "col_a_cash_on_hand_close_of_period",
            "col_a_debts_to", "col_a_debts_by", "col_a_convention_expenditures",
            "col_a_refunds_rebates_returns_deposits", "col_a_expenditures_from_subaccount",
            "col_a_total_expenditures", "col_b_cash_on_hand_beginning_reporting_period",
            "col_b_total_receipts", "col_b_subtotal", "col_b_total_disbursements",
            "col_b_cash_on_hand_close_of_period", "col_b_convention_expenditures",
            "col_b_refunds_rebates_returns_deposits", "col_b_expenditures_from_subaccount",
            "col_b_total_expenditures", "treasurer_name", "date_signed",
        ],
    },
    "^f5[na]": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "entity_type", "organization_name",
            "individual_last_name", "individual_first_name", "individual_middle_name",
            "individual_prefix", "individual_suffix", "change_of_address", "street_1",
            "street_2", "city", "state", "zip_code", "qualified_nonprofit",
            "individual_employer", "individual_occupation", "report_code",
            "report_type_24hour_48hour", "original_amendment_date", "coverage_from_date",
            "coverage_through_date", "total_contribution", "total_independent_expenditure",
            "person_completing_last_name", "person_completing_first_name",
            "person_completing_middle_name", "person_completing_prefix",
            "person_completing_suffix", "date_signed", "date_notarized",
            "date_notary_commission_expires", "notary_last_name", "notary_first_name",
            "notary_middle_name", "notary_prefix", "notary_suffix",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type", "name", "street_1",
            "street_2", "city", "state", "zip_code", "qualified_nonprofit",
            "individual_employer", "individual_occupation", "report_code",
            "report_type_24hour_48hour", "coverage_from_date", "coverage_through_date",
            "total_contribution", "total_independent_expenditure", "person_completing_name",
            "date_signed", "date_notarized", "date_notary_commission_expires", "notary_name",
        ],
    },
    "^f56": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number", "entity_type",
            "contributor_organization_name", "contributor_last_name", "contributor_first_name",
            "contributor_middle_name", "contributor_prefix", "contributor_suffix",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "contributor_fec_id",
            "contribution_date", "contribution_amount", "contributor_employer",
            "contributor_occupation",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type", "contributor_name",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "contributor_fec_id",
            "contributor_employer", "contributor_occupation", "contribution_date",
            "contribution_amount", None, "transaction_id_number",
        ],
    },
    "^f57": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number", "entity_type",
            "payee_organization_name", "payee_last_name", "payee_first_name",
            "payee_middle_name", "payee_prefix", "payee_suffix", "payee_street_1",
            "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "expenditure_purpose_descrip", "category_code", "candidate_id_number",
            "candidate_last_name", "candidate_first_name", "candidate_middle_name",
            "candidate_prefix", "candidate_suffix", "candidate_office", "candidate_state",
            "candidate_district", "support_oppose_code", "expenditure_date",
            "expenditure_amount", "calendar_y_t_d_per_election_office", "election_code",
            "election_other_description",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type", "payee_name",
            "payee_street_1", "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "expenditure_purpose_descrip", "support_oppose_code", "candidate_id_number",
            "candidate_name", "candidate_office", "candidate_state", "candidate_district",
            "expenditure_date", "expenditure_amount", "calendar_y_t_d_per_election_office",
            "election_code", "election_other_description", None, "transaction_id_number",
        ],
    },
    "(^f6$)|(^f6[an])": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "original_amendment_date",
            "committee_name", "street_1", "street_2", "city", "state", "zip_code",
            "candidate_id_number", "candidate_last_name", "candidate_first_name",
            "candidate_middle_name", "candidate_prefix", "candidate_suffix", "candidate_office",
            "candidate_state", "candidate_district", "signer_last_name", "signer_first_name",
            "signer_middle_name", "signer_prefix", "signer_suffix", "date_signed",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "committee_name", "street_1", "street_2",
            "city", "state", "zip_code", "candidate_id_number", "candidate_name",
            "candidate_office", "candidate_state", "candidate_district", "name_signed",
            "date_signed",
        ],
    },
    "^f65": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name", "entity_type",
            "contributor_organization_name", "contributor_last_name", "contributor_first_name",
            "contributor_middle_name", "contributor_prefix", "contributor_suffix",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "contributor_employer",
            "contributor_occupation", "contribution_date", "contribution_amount",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "contributor_name",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "contributor_employer",
            "contributor_occupation", "contribution_date", "contribution_amount", None,
            "transaction_id_number", "entity_type",
        ],
    },
    "^f7[na]": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "organization_name", "street_1",
            "street_2", "city", "state", "zip_code", "organization_type", "report_code",
            "election_date", "election_state", "coverage_from_date", "coverage_through_date",
            "total_costs", "designated_last_name", "designated_first_name",
            "designated_middle_name", "designated_prefix", "designated_suffix",
            "designated_title", "date_signed",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "organization_name", "street_1",
            "street_2", "city", "state", "zip_code", "organization_type", "report_code",
            "election_date", "election_state", "coverage_from_date", "coverage_through_date",
            "total_costs", "designated_name", "designated_title", "date_signed",
        ],
    },
    "^f76": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "communication_type", "communication_type_description", "communication_class",
            "communication_date", "communication_cost", "election_code",
            "election_other_description", "support_oppose_code", "candidate_id_number",
            "candidate_last_name", "candidate_first_name", "candidate_middle_name",
            "candidate_prefix", "candidate_suffix", "candidate_office", "candidate_state",
            "candidate_district",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "communication_type",
            "communication_type_description", "communication_class", "communication_date",
            "communication_cost", "election_code", "election_other_description",
            "support_oppose_code", "candidate_id_number", "candidate_name",
            "candidate_office", "candidate_state", "candidate_district", None,
            "transaction_id_number",
        ],
    },
    "^f9": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "entity_type", "organization_name",
            "individual_last_name", "individual_first_name", "individual_middle_name",
            "individual_prefix", "individual_suffix", "change_of_address", "street_1",
            "street_2", "city", "state", "zip_code", "individual_employer",
            "individual_occupation", "coverage_from_date", "coverage_through_date",
            "date_public_distribution", "communication_title", "filer_code",
            "filer_code_description", "segregated_bank_account", "custodian_last_name",
            "custodian_first_name", "custodian_middle_name", "custodian_prefix",
            "custodian_suffix", "custodian_street_1", "custodian_street_2", "custodian_city",
            "custodian_state", "custodian_zip_code", "custodian_employer",
            "custodian_occupation", "total_donations_this_statement",
            "total_disbursements_this_statement", "person_completing_last_name",
            "person_completing_first_name", "person_completing_middle_name",
            "person_completing_prefix", "person_completing_suffix", "date_signed",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "name", "street_1", "street_2", "city",
            "state", "zip_code", "individual_employer", "individual_occupation",
            "coverage_from_date", "coverage_through_date", "date_public_distribution",
            "communication_title", "filer_code", "filer_code_description",
            "segregated_bank_account", "custodian_name", "custodian_street_1",
            "custodian_street_2", "custodian_city", "custodian_state", "custodian_zip_code",
            "custodian_employer", "custodian_occupation", "total_donations_this_statement",
            "total_disbursements_this_statement", "person_completing_name", "date_signed",
        ],
    },
    "^f91": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "controller_last_name",
            "controller_first_name", "controller_middle_name", "controller_prefix",
            "controller_suffix", "street_1", "street_2", "city", "state", "zip_code",
            "controller_employer", "controller_occupation", "amended_cd",
            "transaction_id_number",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "controller_name", "street_1", "street_2",
            "city", "state", "zip_code", "controller_employer", "controller_occupation",
            "amended_cd", "transaction_id_number",
        ],
    },
    "^f92": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number", "entity_type",
            "contributor_organization_name", "contributor_last_name", "contributor_first_name",
            "contributor_middle_name", "contributor_prefix", "contributor_suffix",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "contribution_date",
            "contribution_amount", "transaction_code", "transaction_description",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "contributor_name", "contributor_street_1",
            "contributor_street_2", "contributor_city", "contributor_state",
            "contributor_zip_code", "contribution_date", "contribution_amount",
            "transaction_code", "transaction_description", None, "transaction_id_number",
            "entity_type",
        ],
    },
    "^f93": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number", "entity_type",
            "payee_organization_name", "payee_last_name", "payee_first_name",
            "payee_middle_name", "payee_prefix", "payee_suffix", "payee_street_1",
            "payee_street_2", "payee_city", "payee_state", "payee_zip_code", "election_code",
            "election_other_description", "expenditure_date", "expenditure_amount",
            "expenditure_purpose_descrip", "payee_employer", "payee_occupation",
            "communication_date",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "payee_name", "payee_street_1",
            "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "expenditure_purpose_descrip", "expenditure_date", "expenditure_amount",
            "communication_date", None, "transaction_id_number", "entity_type",
        ],
    },
    "^f94": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name", "candidate_id_number",
            "candidate_last_name", "candidate_first_name", "candidate_middle_name",
            "candidate_prefix", "candidate_suffix", "candidate_office", "candidate_state",
            "candidate_district", "election_code", "election_other_description",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "candidate_id_number", "candidate_name",
            "candidate_office", "candidate_state", "candidate_district", "election_code",
            "election_other_description", None, "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name",
        ],
    },
    "^f99": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "committee_name", "street_1", "street_2",
            "city", "state", "zip_code", "treasurer_last_name", "treasurer_first_name",
            "treasurer_middle_name", "treasurer_prefix", "treasurer_suffix", "date_signed",
            "text_code", "text",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "committee_name", "street_1", "street_2",
            "city", "state", "zip_code", "treasurer_name", "date_signed", "text_code", "text",
        ],
    },
    "^h1": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "presidential_only_election_year",
            "presidential_senate_election_year", "senate_only_election_year",
            "non_pres_non_senate_election_year", "flat_minimum_federal_percentage",
            "federal_percent", "nonfederal_percent", "administrative_ratio_applies",
            "generic_voter_drive_ratio_applies",
            "public_communications_referencing_party_ratio_applies",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "national_party_committee_percentage",
            "house_senate_party_committees_minimum_federal_percentage",
            "house_senate_party_committees_percentage_federal_candidate_support",
            "house_senate_party_committees_percentage_nonfederal_candidate_support",
            "house_senate_party_committees_actual_federal_candidate_support",
            "house_senate_party_committees_actual_nonfederal_candidate_support",
            "house_senate_party_committees_percentage_actual_federal",
            "separate_segregated_fund_percentage", "separate_segregated_fund_federal_percentage",
            "separate_segregated_fund_nonfederal_percentage",
        ],
    },
    "^h2": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "activity_event_name",
            "direct_fundraising", "exempt_activity", "direct_candidate_support", "ratio_code",
            "federal_percentage", "nonfederal_percentage",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "activity_event_name",
            "direct_fundraising", "direct_candidate_support", "ratio_code",
            "federal_percentage", "nonfederal_percentage",
        ],
    },
    "^h3": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "account_name", "event_type",
            "event_activity_name", "receipt_date", "total_amount_transferred",
            "transferred_amount",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "back_reference_tran_id_number",
            "account_name", "event_type", "event_activity_name", "receipt_date",
            "total_amount_transferred", "transferred_amount", None, "transaction_id_number",
        ],
    },
    "^h4": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name", "entity_type",
            "payee_organization_name", "payee_last_name", "payee_first_name",
            "payee_middle_name", "payee_prefix", "payee_suffix", "payee_street_1",
            "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "event_activity_name", "expenditure_date", "expenditure_amount", "federal_share",
            "nonfederal_share", "event_year_to_date", "expenditure_purpose_descrip",
            "category_code", "administrative_voter_drive_activity", "fundraising_activity",
            "exempt_activity", "direct_candidate_support_activity", "memo_code",
            "memo_text_description",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type", "payee_name",
            "payee_street_1", "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "account_identifier", "expenditure_purpose_descrip", "expenditure_date",
            "expenditure_amount", "federal_share", "nonfederal_share", "event_year_to_date",
            None, "transaction_id_number", "back_reference_tran_id_number",
            "back_reference_sched_name", "memo_code", "memo_text_description",
        ],
    },
    "^h5": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1|^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "transaction_id_number", "account_name",
            "receipt_date", "total_amount_transferred", "voter_registration_amount",
            "voter_id_amount", "gotv_amount", "generic_campaign_amount",
        ],
    },
    "^h6": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name", "entity_type",
            "payee_organization_name", "payee_last_name", "payee_first_name",
            "payee_middle_name", "payee_prefix", "payee_suffix", "payee_street_1",
            "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "expenditure_date", "expenditure_amount", "federal_share", "levin_share",
            "activity_year_to_date", "expenditure_purpose_descrip", "category_code",
            "voter_registration_activity", "gotv_activity", "voter_id_activity",
            "generic_campaign_activity", "memo_code", "memo_text_description",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type", "payee_name",
            "payee_street_1", "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "expenditure_purpose_descrip", "expenditure_date", "expenditure_amount",
            "federal_share", "levin_share", "activity_year_to_date", None,
            "transaction_id_number", "back_reference_tran_id_number",
            "back_reference_sched_name", "memo_code", "memo_text_description",
        ],
    },
    "^sa": {
        "^8.0|^7.0|^6.4": [
            "form_type", "filer_committee_id_number", "transaction_id", "back_reference_tran_id_number",
            "back_reference_sched_name", "entity_type", "contributor_organization_name",
            "contributor_last_name", "contributor_first_name", "contributor_middle_name",
            "contributor_prefix", "contributor_suffix", "contributor_street_1",
            "contributor_street_2", "contributor_city", "contributor_state",
            "contributor_zip_code", "election_code", "election_other_description",
            "contribution_date", "contribution_amount", "contribution_aggregate",
            "contribution_purpose_descrip", "contributor_employer", "contributor_occupation",
            "donor_committee_fec_id", "donor_committee_name", "donor_candidate_fec_id",
            "donor_candidate_last_name", "donor_candidate_first_name",
            "donor_candidate_middle_name", "donor_candidate_prefix", "donor_candidate_suffix",
            "donor_candidate_office", "donor_candidate_state", "donor_candidate_district",
            "conduit_name", "conduit_street1", "conduit_street2", "conduit_city",
            "conduit_state", "conduit_zip", "memo_code", "memo_text_description",
            "reference_code",
        ],
        "^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id", "back_reference_tran_id_number",
            "back_reference_sched_name", "entity_type", "contributor_organization_name",
            "contributor_last_name", "contributor_first_name", "contributor_middle_name",
            "contributor_prefix", "contributor_suffix", "contributor_street_1",
            "contributor_street_2", "contributor_city", "contributor_state",
            "contributor_zip_code", "election_code", "election_other_description",
            "contribution_date", "contribution_amount", "contribution_aggregate",
            "contribution_purpose_code", "contribution_purpose_descrip", "contributor_employer",
            "contributor_occupation", "donor_committee_fec_id", "donor_committee_name",
            "donor_candidate_fec_id", "donor_candidate_last_name", "donor_candidate_first_name",
            "donor_candidate_middle_name", "donor_candidate_prefix", "donor_candidate_suffix",
            "donor_candidate_office", "donor_candidate_state", "donor_candidate_district",
            "conduit_name", "conduit_street1", "conduit_street2", "conduit_city",
            "conduit_state", "conduit_zip", "memo_code", "memo_text_description",
            "increased_limit_code",
        ],
        "^5.3|^5.2|^5.1|^5.0": [
            "form_type", "filer_committee_id_number", "entity_type", "contributor_name",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "election_code",
            "election_other_description", "contributor_employer", "contributor_occupation",
            "contribution_aggregate", "contribution_date", "contribution_amount",
            "contribution_purpose_code", "contribution_purpose_descrip",
            "donor_committee_fec_id", "donor_candidate_fec_id", "donor_candidate_name",
            "donor_candidate_office", "donor_candidate_state", "donor_candidate_district",
            "conduit_name", "conduit_street1", "conduit_street2", "conduit_city",
            "conduit_state", "conduit_zip", "memo_code", "memo_text_description", None,
            "transaction_id", "back_reference_tran_id_number", "back_reference_sched_name",
            "reference_code", "increased_limit_code", "contributor_organization_name",
        ],
        "^3": [
            "form_type", "filer_committee_id_number", "contributor_name", "contributor_street_1",
            "contributor_street_2", "contributor_city", "contributor_state",
            "contributor_zip_code", "election_code", "election_other_description",
            "contributor_employer", "contributor_occupation", "contribution_aggregate",
            "contribution_date", "contribution_amount", "contribution_purpose_code",
            "contribution_purpose_descrip", "donor_committee_fec_id", "donor_candidate_fec_id",
            "donor_candidate_name", "donor_candidate_office", "donor_candidate_state",
            "donor_candidate_district", "conduit_name", "conduit_street1", "conduit_street2",
            "conduit_city", "conduit_state", "conduit_zip", "memo_code",
            "memo_text_description", None, "transaction_id",
        ],
    },
    "^sa3l": {
        "^8.0|^7.0|^6.4": [
            "form_type", "filer_committee_id_number", "transaction_id",
            "back_reference_tran_id_number", "back_reference_sched_name", "entity_type",
            "contributor_organization_name", "contributor_last_name", "contributor_first_name",
            "contributor_middle_name", "contributor_prefix", "contributor_suffix",
            "contributor_street_1", "contributor_street_2", "contributor_city",
            "contributor_state", "contributor_zip_code", "contributor_employer",
            "contributor_occupation", "contributor_fec_id", "contribution_date",
            "bundled_amount_period", "bundled_amount_semi_annual", "memo_code",
            "memo_text_description", "reference_code",
        ],
    },
    "^sb": {
        "^8.0|^7.0|^6.4": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name", "entity_type",
            "payee_organization_name", "payee_last_name", "payee_first_name",
            "payee_middle_name", "payee_prefix", "payee_suffix", "payee_street_1",
            "payee_street_2", "payee_city", "payee_state", "payee_zip_code", "election_code",
            "election_other_description", "expenditure_date", "expenditure_amount",
            "semi_annual_refunded_bundled_amt", "expenditure_purpose_descrip", "category_code",
            "beneficiary_committee_fec_id", "beneficiary_committee_name",
            "beneficiary_candidate_fec_id", "beneficiary_candidate_last_name",
            "beneficiary_candidate_first_name", "beneficiary_candidate_middle_name",
            "beneficiary_candidate_prefix", "beneficiary_candidate_suffix",
            "beneficiary_candidate_office", "beneficiary_candidate_state",
            "beneficiary_candidate_district", "conduit_name", "conduit_street_1",
            "conduit_street_2", "conduit_city", "conduit_state", "conduit_zip_code",
            "memo_code", "memo_text_description",
            "reference_to_si_or_sl_system_code_that_identifies_the_account",
        ],
        "^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name", "entity_type",
            "payee_organization_name", "payee_last_name", "payee_first_name",
            "payee_middle_name", "payee_prefix", "payee_suffix", "payee_street_1",
            "payee_street_2", "payee_city", "payee_state", "payee_zip_code", "election_code",
            "election_other_description", "expenditure_date", "expenditure_amount",
            "expenditure_purpose_code", "expenditure_purpose_descrip", "category_code",
            "beneficiary_committee_fec_id", "beneficiary_committee_name",
            "beneficiary_candidate_fec_id", "beneficiary_candidate_last_name",
            "beneficiary_candidate_first_name", "beneficiary_candidate_middle_name",
            "beneficiary_candidate_prefix", "beneficiary_candidate_suffix",
            "beneficiary_candidate_office", "beneficiary_candidate_state",
            "beneficiary_candidate_district", "conduit_name", "conduit_street_1",
            "conduit_street_2", "conduit_city", "conduit_state", "conduit_zip_code",
            "memo_code", "memo_text_description",
            "reference_to_si_or_sl_system_code_that_identifies_the_account",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type", "payee_name",
            "payee_street_1", "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "expenditure_purpose_code", "expenditure_purpose_descrip", "election_code",
            "election_other_description", "expenditure_date", "expenditure_amount",
            "beneficiary_committee_fec_id", "beneficiary_candidate_fec_id",
            "beneficiary_candidate_name", "beneficiary_candidate_office",
            "beneficiary_candidate_state", "beneficiary_candidate_district", "conduit_name",
            "conduit_street_1", "conduit_street_2", "conduit_city", "conduit_state",
            "conduit_zip_code", "memo_code", "memo_text_description", None,
            "transaction_id_number", "back_reference_tran_id_number",
            "back_reference_sched_name", "category_code",
        ],
    },
    "^sc[^1-2]": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "receipt_line_number", "entity_type", "lender_organization_name",
            "lender_last_name", "lender_first_name", "lender_middle_name", "lender_prefix",
            "lender_suffix", "lender_street_1", "lender_street_2", "lender_city",
            "lender_state", "lender_zip_code", "election_code", "election_other_description",
            "loan_amount_original", "loan_payment_to_date", "loan_balance",
            "loan_incurred_date_terms", "loan_due_date_terms", "loan_interest_rate_terms",
            "secured_yes_no", "personal_funds", "lender_committee_id_number",
            "lender_candidate_id_number", "lender_candidate_last_name",
            "lender_candidate_first_name", "lender_candidate_middle_name",
            "lender_candidate_prefix", "lender_candidate_suffix", "lender_candidate_office",
            "lender_candidate_state", "lender_candidate_district", "memo_code",
            "memo_text_description",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type", "lender_name",
            "lender_street_1", "lender_street_2", "lender_city", "lender_state",
            "lender_zip_code", "election_code", "election_other_description",
            "loan_amount_original", "loan_payment_to_date", "loan_balance",
            "loan_incurred_date_terms", "loan_due_date_terms", "loan_interest_rate_terms",
            "secured_yes_no", "lender_committee_id_number", "lender_candidate_id_number",
            "lender_candidate_name", "lender_candidate_office", "lender_candidate_state",
            "lender_candidate_district", None, "transaction_id_number", "receipt_line_number",
        ],
    },
    "^sc1": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "lender_organization_name", "lender_street_1",
            "lender_street_2", "lender_city", "lender_state", "lender_zip_code", "loan_amount",
            "loan_interest_rate", "loan_incurred_date", "loan_due_date", "loan_restructured",
            "loan_inccured_date_original", "credit_amount_this_draw", "total_balance",
            "others_liable", "collateral", "description", "collateral_value",
            "perfected_interest", "future_income", "future_income_description",
            "future_income_estimated_value", "depository_account_established_date",
            "ind_name_account_location", "account_street_1", "account_street_2",
            "account_city", "account_state", "account_zip_code",
            "dep_acct_auth_date_presidential", "basis_of_loan_description",
            "treasurer_last_name", "treasurer_first_name", "treasurer_middle_name",
            "treasurer_prefix", "treasurer_suffix", "treasurer_date_signed",
            "authorized_last_name", "authorized_first_name", "authorized_middle_name",
            "authorized_prefix", "authorized_suffix", "authorized_title",
            "authorized_date_signed",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "lender_organization_name",
            "lender_street_1", "lender_street_2", "lender_city", "lender_state",
            "lender_zip_code", "loan_amount", "loan_interest_rate", "loan_incurred_date",
            "loan_due_date", "loan_restructured", "loan_inccured_date_original",
            "credit_amount_this_draw", "total_balance", "others_liable", "collateral",
            "description", "collateral_value", "perfected_interest", "future_income",
            "future_income_description", "future_income_estimated_value",
            "depository_account_established_date", "ind_name_account_location",
            "account_street_1", "account_street_2", "account_city", "account_state",
            "account_zip_code", "dep_acct_auth_date_presidential", "basis_of_loan_description",
            "treasurer_name", "treasurer_date_signed", "authorized_name", "authorized_title",
            "authorized_date_signed", None, "transaction_id_number",
            "back_reference_tran_id_number",
        ],
    },
    "^sc2": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "guarantor_last_name", "guarantor_first_name",
            "guarantor_middle_name", "guarantor_prefix", "guarantor_suffix",
            "guarantor_street_1", "guarantor_street_2", "guarantor_city", "guarantor_state",
            "guarantor_zip_code", "guarantor_employer", "guarantor_occupation",
            "guaranteed_amount",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "guarantor_name", "guarantor_street_1",
            "guarantor_street_2", "guarantor_city", "guarantor_state", "guarantor_zip_code",
            "guarantor_employer", "guarantor_occupation", "guaranteed_amount", None,
            "transaction_id_number", "back_reference_tran_id_number",
        ],
    },
    "^sd": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number", "entity_type",
            "creditor_organization_name", "creditor_last_name", "creditor_first_name",
            "creditor_middle_name", "creditor_prefix", "creditor_suffix",
            "creditor_street_1", "creditor_street_2", "creditor_city", "creditor_state",
            "creditor_zip_code", "purpose_of_debt_or_obligation",
            "beginning_balance_this_period", "incurred_amount_this_period",
            "payment_amount_this_period", "balance_at_close_this_period",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type", "creditor_name",
            "creditor_street_1", "creditor_street_2", "creditor_city", "creditor_state",
            "creditor_zip_code", "purpose_of_debt_or_obligation",
            "beginning_balance_this_period", "incurred_amount_this_period",
            "payment_amount_this_period", "balance_at_close_this_period", None,
            "transaction_id_number",
        ],
    },
    "^se": {
        "^8.0": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name", "entity_type",
            "payee_organization_name", "payee_last_name", "payee_first_name",
            "payee_middle_name", "payee_prefix", "payee_suffix", "payee_street_1",
            "payee_street_2", "payee_city", "payee_state", "payee_zip_code", "election_code",
            "election_other_description", "dissemination_date", "expenditure_amount",
            "calendar_y_t_d_per_election_office", "expenditure_purpose_descrip",
            "category_code", "payee_cmtte_fec_id_number", "support_oppose_code",
            "candidate_id_number", "candidate_last_name", "candidate_first_name",
            "candidate_middle_name", "candidate_prefix", "candidate_suffix",
            "candidate_office", "candidate_district", "candidate_state",
            "completing_last_name", "completing_first_name", "completing_middle_name",
            "completing_prefix", "completing_suffix", "date_signed", "memo_code",
            "memo_text_description", "expenditure_date",
        ],
        "^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name", "entity_type",
            "payee_organization_name", "payee_last_name", "payee_first_name",
            "payee_middle_name", "payee_prefix", "payee_suffix", "payee_street_1",
            "payee_street_2", "payee_city", "payee_state", "payee_zip_code", "election_code",
            "election_other_description", "expenditure_date", "expenditure_amount",
            "calendar_y_t_d_per_election_office", "expenditure_purpose_descrip",
            "category_code", "payee_cmtte_fec_id_number", "support_oppose_code",
            "candidate_id_number", "candidate_last_name", "candidate_first_name",
            "candidate_middle_name", "candidate_prefix", "candidate_suffix",
            "candidate_office", "candidate_district", "candidate_state",
            "completing_last_name", "completing_first_name", "completing_middle_name",
            "completing_prefix", "completing_suffix", "date_signed", "memo_code",
            "memo_text_description",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type", "payee_name",
            "payee_street_1", "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "expenditure_purpose_descrip", "support_oppose_code", "candidate_id_number",
            "candidate_name", "candidate_office", "candidate_state", "candidate_district",
            "expenditure_date", "expenditure_amount", "calendar_y_t_d_per_election_office",
            "election_code", "election_other_description", "completing_name", "date_signed",
            None, "transaction_id_number", "memo_code", "memo_text_description",
        ],
    },
    "^sf": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_name",
            "coordinated_expenditures", "designating_committee_id_number",
            "designating_committee_name", "subordinate_committee_id_number",
            "subordinate_committee_name", "subordinate_street_1", "subordinate_street_2",
            "subordinate_city", "subordinate_state", "subordinate_zip_code", "entity_type",
            "payee_organization_name", "payee_last_name", "payee_first_name",
            "payee_middle_name", "payee_prefix", "payee_suffix", "payee_street_1",
            "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "expenditure_date", "expenditure_amount", "aggregate_general_elec_expended",
            "expenditure_purpose_descrip", "category_code", "payee_committee_id_number",
            "payee_candidate_id_number", "payee_candidate_last_name",
            "payee_candidate_first_name", "payee_candidate_middle_name",
            "payee_candidate_prefix", "payee_candidate_suffix", "payee_candidate_office",
            "payee_candidate_state", "payee_candidate_district", "memo_code",
            "memo_text_description",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "entity_type",
            "coordinated_expenditures", "designating_committee_id_number",
            "designating_committee_name", "subordinate_committee_id_number",
            "subordinate_committee_name", "subordinate_street_1", "subordinate_street_2",
            "subordinate_city", "subordinate_state", "subordinate_zip_code", "payee_name",
            "payee_street_1", "payee_street_2", "payee_city", "payee_state", "payee_zip_code",
            "aggregate_general_elec_expended", "expenditure_purpose_descrip",
            "expenditure_date", "expenditure_amount", "payee_committee_id_number",
            "payee_candidate_id_number", "payee_candidate_name", "payee_candidate_office",
            "payee_candidate_state", "payee_candidate_district", None,
            "transaction_id_number", "memo_code", "memo_text_description",
        ],
    },
    "^sl": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1|^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "record_id_number", "account_name",
            "coverage_from_date", "coverage_through_date",
            "col_a_itemized_receipts_persons", "col_a_unitemized_receipts_persons",
            "col_a_total_receipts_persons", "col_a_other_receipts", "col_a_total_receipts",
            "col_a_voter_registration_disbursements", "col_a_voter_id_disbursements",
            "col_a_gotv_disbursements", "col_a_generic_campaign_disbursements",
            "col_a_total_disbursements_allocated", "col_a_other_disbursements",
            "col_a_total_disbursements", "col_a_beginning_cash_on_hand",
            "col_a_receipts_period", "col_a_subtotal_period", "col_a_disbursements_period",
            "col_a_ending_cash_on_hand", "col_b_itemized_receipts_persons",
            "col_b_unitemized_receipts_persons", "col_b_total_receipts_persons",
            "col_b_other_receipts", "col_b_total_receipts",
            "col_b_voter_registration_disbursements", "col_b_voter_id_disbursements",
            "col_b_gotv_disbursements", "col_b_generic_campaign_disbursements",
            "col_b_total_disbursements_allocated", "col_b_other_disbursements",
            "col_b_total_disbursements", "col_b_beginning_cash_on_hand",
            "col_b_receipts_period", "col_b_subtotal_period", "col_b_disbursements_period",
            "col_b_ending_cash_on_hand",
        ],
    },
    "^text": {
        "^8.0|^7.0|^6.4|^6.3|^6.2|^6.1": [
            "form_type", "filer_committee_id_number", "transaction_id_number",
            "back_reference_tran_id_number", "back_reference_sched_form_name", "text",
        ],
        "^5.3|^5.2|^5.1|^5.0|^3": [
            "form_type", "filer_committee_id_number", "back_reference_tran_id_number",
            "back_reference_sched_form_name", "text",
        ],
    },
}
